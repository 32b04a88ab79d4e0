from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    debug: bool = False
    log_level: str = "INFO"
    native_symbol: str = "ETH"  # reported for Ether transfers
    skip_malformed: bool = False  # batch extraction: skip truncated token calls instead of raising

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()

    class Config:
        env_file = ".env"
        env_prefix = "ETHTRANSFER_"
        extra = "ignore"


settings = Settings()
