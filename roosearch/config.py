"""
RooSearch configuration — load, write, and validate roosearch.json.

Uses Pydantic models for schema validation and sensible defaults. A workspace
without a config file gets the defaults, which match a stock local Qdrant and
Ollama setup.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Pydantic config models
# ---------------------------------------------------------------------------

class QdrantConfig(BaseModel):
    url: str = "http://localhost:6333"
    api_key_env: str = "QDRANT_API_KEY"
    timeout: Optional[int] = None


class EmbeddingConfig(BaseModel):
    url: str = "http://localhost:11434/api/embed"
    model: str = "nomic-embed-text"
    timeout: float = 60.0


class SearchConfig(BaseModel):
    score_threshold: float = 0.40    # points below are dropped server-side
    limit: int = 50
    hnsw_ef: int = 128
    exact: bool = False
    payload_fields: list[str] = Field(default_factory=lambda: [
        "filePath", "codeChunk", "startLine", "endLine", "pathSegments",
    ])


class WorkspaceConfig(BaseModel):
    prefix: str = "ws-"
    hash_length: int = Field(default=16, ge=1, le=64)


class RooSearchConfig(BaseModel):
    version: str = "1.0"
    qdrant: QdrantConfig = Field(default_factory=QdrantConfig)
    embedding: EmbeddingConfig = Field(default_factory=EmbeddingConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

ROOSEARCH_DIR = ".roosearch"
CONFIG_FILE = "roosearch.json"


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def roosearch_dir(workspace: Path) -> Path:
    """Return the .roosearch directory for a workspace."""
    return workspace / ROOSEARCH_DIR


def config_path(workspace: Path) -> Path:
    """Return the path to roosearch.json."""
    return roosearch_dir(workspace) / CONFIG_FILE


def create_default_config() -> RooSearchConfig:
    """Create a new RooSearchConfig with the stock defaults."""
    return RooSearchConfig()


def write_config(workspace: Path, config: RooSearchConfig) -> Path:
    """Write the config to .roosearch/roosearch.json and return its path."""
    path = config_path(workspace)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(config.model_dump(), indent=2) + "\n",
        encoding="utf-8",
    )
    return path


def load_config(workspace: Path) -> RooSearchConfig:
    """Load and validate the config for *workspace*.

    Falls back to the defaults when the workspace has no roosearch.json.
    """
    path = config_path(workspace)
    if not path.exists():
        return create_default_config()
    data = json.loads(path.read_text(encoding="utf-8"))
    return RooSearchConfig(**data)


def qdrant_api_key(config: RooSearchConfig) -> Optional[str]:
    """Read the Qdrant API key from the environment (``.env`` files included)."""
    load_dotenv()  # workspace-local .env
    load_dotenv(dotenv_path=Path.home() / ROOSEARCH_DIR / ".env", override=False)
    return os.environ.get(config.qdrant.api_key_env) or None
