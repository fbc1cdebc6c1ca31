from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_prefix='FOTITION_', case_sensitive=True, extra='ignore')
    HOST: str = 'http://localhost/api/v1'
    TIMEOUT: float = 30.0
    ACCESS_TOKEN: str | None = None
    API_KEY: str | None = None
    API_KEY_HEADER: str = 'api_key'
    API_KEY_PREFIX: str | None = None
    USERNAME: str | None = None
    PASSWORD: str | None = None
    VERIFY_SSL: bool = True
    DEBUG: bool = False


settings = Settings()
