"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"
)


class Base(BaseModel):
    """Base model accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EnginesConfig(Base):
    """Which upstream engines are queried."""

    bing: bool = False
    brave: bool = False
    duckduckgo: bool = True
    librex: bool = False
    startpage: bool = False

    def enabled(self) -> list[str]:
        return [name for name, on in self.model_dump().items() if on]


class Config(Base):
    """Root configuration for websurf."""

    engines: EnginesConfig = Field(default_factory=EnginesConfig)
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = "en-US,en;q=0.5"
    safe_search: int = Field(default=1, ge=0, le=4)
    request_timeout: float = Field(default=30.0, gt=0)
