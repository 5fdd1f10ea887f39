from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """엔진 설정 (환경변수 ERRORSHAPE_* / .env)"""

    model_config = SettingsConfigDict(
        env_prefix="ERRORSHAPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Event
    platform: str = "javascript"
    attach_stacktrace: bool = False  # captureMessage에도 스택 첨부

    # Frames
    stacktrace_limit: int = 100
    capture_markers: tuple[str, ...] = ("captureMessage", "captureException")  # SDK 진입점 (맨 위 프레임)
    wrapper_marker: str = "sentryWrapped"  # SDK 래퍼 (맨 아래 프레임)

    # Linked errors
    linked_errors_key: str = "cause"
    linked_errors_limit: int = 5

    # Non-Error 직렬화
    serialize_depth: int = 3
    serialize_max_size: int = 100 * 1024  # bytes (JSON)
    keys_max_length: int = 40


settings = Settings()
