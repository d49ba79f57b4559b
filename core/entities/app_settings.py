from dataclasses import dataclass


@dataclass
class AppSettings:
    app_name: str = "ARVINmatch"
    primary_color: str = "#1e3a8a"
    secondary_color: str = "#93c5fd"
    logo_url: str = ""
