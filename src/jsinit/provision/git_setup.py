"""Git bootstrap: Husky installs its hooks into an existing work tree."""

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError


def is_inside_work_tree(directory: str) -> bool:
    try:
        Repo(directory, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return False
    return True


def ensure_git_repository(directory: str) -> bool:
    """Initialize a repository in directory unless it is already in one.

    Returns True if a new repository was created.
    """
    if is_inside_work_tree(directory):
        return False
    Repo.init(directory)
    return True
