"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from windtree.engine.config import CUT_MERGE_TOLERANCE, TreeConfig


class Settings(BaseSettings):
    windtree_env: str = "development"
    windtree_log_level: str = "info"
    windtree_output_dir: str = "web/public"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Region tree
    tree_max_depth: int = 4
    tree_leaf_segment_limit: int = 2
    cut_merge_tolerance: float = CUT_MERGE_TOLERANCE
    ray_far_x: float = 1000.0
    shortcut_offset: float = 20.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def tree_config(self, max_depth: int | None = None) -> TreeConfig:
        return TreeConfig(
            max_depth=self.tree_max_depth if max_depth is None else max_depth,
            leaf_segment_limit=self.tree_leaf_segment_limit,
            cut_merge_tolerance=self.cut_merge_tolerance,
            ray_far_x=self.ray_far_x,
            shortcut_offset=self.shortcut_offset,
        )


settings = Settings()
