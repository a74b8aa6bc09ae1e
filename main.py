import marimo

__generated_with = "0.18.3"
app = marimo.App()


@app.cell
def _():
    import object_store as obs
    from IPython.lib.pretty import pprint
    return obs, pprint


@app.cell
def _(obs):
    def seed(repo):
        repo.add("theme", "dark")
        repo.add("feature_x", True)
        repo.commit("Initial config")

    r = obs.create_object_repo(seed)
    return (r,)


@app.cell
def _(pprint, r):
    pprint(r)
    return


@app.cell
def _(r):
    r.branch().create("dev")
    r.branch().checkout("dev")
    r.add("theme", "light")
    r.remove("feature_x")
    r.commit("Try light theme")
    return


@app.cell
def _(pprint, r):
    pprint(r)
    print(r.log().message)
    return


@app.cell
def _(r):
    r.branch().checkout("master")
    print(r.branch().list().message)
    print(r.get("theme").payload)
    return


if __name__ == "__main__":
    app.run()
