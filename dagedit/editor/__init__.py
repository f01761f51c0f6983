"""Path-addressed copy-on-write editor."""

from dagedit.editor.editor import Editor
from dagedit.editor.policy import FAIL, CreateWith, CreationPolicy, Fail

__all__ = ["FAIL", "CreateWith", "CreationPolicy", "Editor", "Fail"]
