from dataclasses import dataclass


@dataclass(frozen=True)
class HostContext:
    display_mode: str = "inline"  # "inline", "pip", "fullscreen"
    theme: str = "light"
    locale: str = "en-US"
