from pydantic import BaseModel, Field
from typing import Literal


class EditorConfig(BaseModel):
    evict_superseded: bool = True


class StoreConfig(BaseModel):
    backend: Literal["memory", "sqlite"] = "memory"
    path: str = Field(default=".dagedit/nodes.db", min_length=1)


class DagEditConfig(BaseModel):
    editor: EditorConfig = Field(default_factory=EditorConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
