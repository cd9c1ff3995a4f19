from pydantic import BaseModel, Field
from typing_extensions import Self

from .env import inject_env, set_class_var_by_env

MAX_DEPTH = 100


@inject_env()
class MarkupEnv:
    minimarkup_max_depth: int = 64
    minimarkup_log_trees: bool = False


class MarkupConfig(BaseModel):
    # nesting limit for open tags and nested tag arguments
    max_depth: int = Field(default=64, ge=1, le=MAX_DEPTH)
    # dump parse trees and results at trace level
    log_trees: bool = False

    @classmethod
    def from_env(cls, reload: bool = False) -> Self:
        if reload:
            set_class_var_by_env(MarkupEnv)
        return cls(
            max_depth=MarkupEnv.minimarkup_max_depth,
            log_trees=MarkupEnv.minimarkup_log_trees,
        )
