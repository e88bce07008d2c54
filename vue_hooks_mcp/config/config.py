"""
Configuration management for the vue-hooks-plus MCP server
"""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GitHubConfig:
    """GitHub REST API configuration"""

    token: Optional[str] = None
    api_url: str = "https://api.github.com"
    api_version: str = "2022-11-28"
    timeout: float = 30.0


@dataclass
class ServerConfig:
    """Server identity advertised to MCP clients"""

    name: str = "vue-hooks-plus"
    version: str = "1.0.0"


@dataclass
class LoggingConfig:
    """Logging configuration"""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class MCPConfig:
    """Main MCP configuration"""

    environment: str = "development"
    github: GitHubConfig = field(default_factory=GitHubConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config() -> MCPConfig:
    """Load configuration from environment variables and defaults"""

    # Environment
    env = os.getenv("MCP_ENVIRONMENT", "development")

    # GitHub config
    github_config = GitHubConfig(
        token=os.getenv("GITHUB_TOKEN") or None,
        api_url=os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/"),
        api_version=os.getenv("GITHUB_API_VERSION", "2022-11-28"),
        timeout=float(os.getenv("GITHUB_TIMEOUT", "30")),
    )

    # Server config
    server_config = ServerConfig(
        name=os.getenv("MCP_SERVER_NAME", "vue-hooks-plus"),
        version=os.getenv("MCP_SERVER_VERSION", "1.0.0"),
    )

    # Logging config
    logging_config = LoggingConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format=os.getenv(
            "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ),
        file_path=os.getenv("LOG_FILE_PATH"),
        max_file_size=int(os.getenv("LOG_MAX_FILE_SIZE", str(10 * 1024 * 1024))),
        backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
    )

    return MCPConfig(
        environment=env,
        github=github_config,
        server=server_config,
        logging=logging_config,
    )
