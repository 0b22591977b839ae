from types import SimpleNamespace

from snapclone import ResettableRef, clone, named_ref, structurally_equal


def snapshot_demo() -> None:
    """Clone a graph that contains a cycle and a shared node."""
    author = SimpleNamespace(name="Ada")
    doc = {"title": "Notes", "authors": [author], "reviewer": author, "tags": {"draft"}}
    doc["self"] = doc

    snapshot = clone(doc)

    print("equal:", structurally_equal(snapshot, doc))
    print("cycle kept:", snapshot["self"] is snapshot)
    print("alias kept:", snapshot["reviewer"] is snapshot["authors"][0])
    print("independent:", snapshot["reviewer"] is not author)


def reset_demo() -> None:
    """Edit a value, then reset it to its initial snapshot."""
    settings = ResettableRef({"theme": "light", "recent": []})
    settings.value["recent"].append("report.txt")
    settings.value["theme"] = "dark"
    print("dirty:", settings.is_dirty())

    settings.reset()
    print("after reset:", settings.value)
    print("before reset:", settings.last_value_before_last_reset())


def named_demo() -> None:
    """Use prefixed accessors for a value."""
    cart = named_ref("cart", ["apple"])
    cart["cart_ref"].value.append("pear")
    cart["cart_reset"]()
    print("cart:", cart["cart_ref"].value, "initial:", cart["cart_initial"]())


if __name__ == "__main__":
    snapshot_demo()
    reset_demo()
    named_demo()
