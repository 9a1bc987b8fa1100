import os


def on_root(root: str, path: str) -> str:
    """
    Map a host path onto the filesystem rooted at root.

    With the real root the path is returned untouched, so relative paths
    keep meaning relative to the working directory.
    """
    if not root or root == "/":
        return path
    return os.path.join(root, path.lstrip("/"))


def is_executable_file(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)
