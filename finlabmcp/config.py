import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(override=False)

DEFAULT_DOCS_DIR = Path(__file__).resolve().parent / "docs"


def _as_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _as_list(raw: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    if raw is None:
        return default
    items = tuple(part.strip() for part in raw.split(",") if part.strip())
    return items or default


@dataclass(frozen=True)
class Settings:
    docs_dir: Path
    docs_title: str
    factor_examples_doc: str
    mcp_server_name: str
    mcp_server_version: str
    mcp_protocol_version: str
    health_server_name: str
    cors_allow_origins: tuple[str, ...]
    log_level: str
    host: str
    port: int


def load_settings() -> Settings:
    docs_dir = (os.getenv("FINLAB_DOCS_DIR") or "").strip()
    return Settings(
        docs_dir=Path(docs_dir).expanduser() if docs_dir else DEFAULT_DOCS_DIR,
        docs_title=os.getenv("FINLAB_DOCS_TITLE", "FinLab").strip() or "FinLab",
        factor_examples_doc=os.getenv(
            "FINLAB_FACTOR_EXAMPLES_DOC", "factor-examples"
        ).strip(),
        mcp_server_name=os.getenv("MCP_SERVER_NAME", "finlab-docs"),
        mcp_server_version=os.getenv("MCP_SERVER_VERSION", "1.0.0"),
        mcp_protocol_version=os.getenv("MCP_PROTOCOL_VERSION", "2024-11-05"),
        health_server_name=os.getenv("MCP_HEALTH_NAME", "finlab-mcp"),
        cors_allow_origins=_as_list(os.getenv("CORS_ALLOW_ORIGINS"), ("*",)),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        host=os.getenv("HOST", "0.0.0.0"),
        port=max(1, min(65535, _as_int(os.getenv("PORT"), 8787))),
    )


settings = load_settings()
