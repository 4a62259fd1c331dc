from pydantic_settings import BaseSettings

from prisma_builder.core.env_manager import EnvManager


class Settings(BaseSettings):
    PROJECT_NAME: str = EnvManager.get_env_variable(
        "PROJECT_NAME", "Prisma Model Builder"
    )
    PROJECT_INFO: str = EnvManager.get_env_variable(
        "PROJECT_INFO", "Describe a model and render its Prisma schema block"
    )
    PROJECT_VERSION: str = EnvManager.get_env_variable("PROJECT_VERSION", "1.0.0")
    API_PREFIX: str = EnvManager.get_env_variable("API_PREFIX", "/api/v1")
    LOG_LEVEL: str = EnvManager.get_env_variable("LOG_LEVEL", "INFO")
    HOST: str = EnvManager.get_env_variable("HOST", "0.0.0.0")
    PORT: int = int(EnvManager.get_env_variable("PORT", "8000"))
    DEFAULT_OUTPUT_FILE: str = EnvManager.get_env_variable(
        "DEFAULT_OUTPUT_FILE", "schema.prisma"
    )
    # 0 keeps every session until it is deleted
    MAX_SESSIONS: int = int(EnvManager.get_env_variable("MAX_SESSIONS", "1000"))


settings = Settings()
