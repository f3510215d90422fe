# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-08
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=True)


@dataclass(frozen=True)
class Config:
    # Azure OpenAI (embeddings)
    openai_azure_api_key: str
    openai_azure_endpoint: str
    openai_azure_embed_deployment: str

    # Chroma (document store)
    chroma_api_key: str
    chroma_tenant: str
    chroma_database: str

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        # Azure OpenAI
        "openai_azure_api_key": "AZURE_OPENAI_API_KEY",
        "openai_azure_endpoint": "AZURE_OPENAI_ENDPOINT",
        "openai_azure_embed_deployment": "AZURE_OPENAI_EMBED_DEPLOYMENT",

        # Chroma
        "chroma_api_key": "CHROMA_API_KEY",
        "chroma_tenant": "CHROMA_TENANT",
        "chroma_database": "CHROMA_DATABASE",
    }

    # Convenient *groups* for use in tests / health checks
    AZURE_OPENAI_ENV_VARS = (
        "AZURE_OPENAI_API_KEY",
        "AZURE_OPENAI_ENDPOINT",
        "AZURE_OPENAI_EMBED_DEPLOYMENT",
    )

    CHROMA_ENV_VARS = (
        "CHROMA_API_KEY",
        "CHROMA_TENANT",
        "CHROMA_DATABASE",
    )

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables."""
        kwargs = {
            field_name: os.getenv(env_name, "").strip()
            for field_name, env_name in Config.ENV_VARS.items()
        }
        return Config(**kwargs)

    def __post_init__(self):
        """Fail fast if any required config is missing."""
        missing_fields = [k for k, v in self.__dict__.items() if not v]

        if missing_fields:
            missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
            raise ValueError(f"Missing required environment variables: {missing_env_vars}")

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "openai_azure_endpoint": self.openai_azure_endpoint,
            "openai_azure_embed_deployment": self.openai_azure_embed_deployment,
            "chroma_tenant": self.chroma_tenant,
            "chroma_database": self.chroma_database,
        }
