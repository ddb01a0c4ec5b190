"""Import this module to load the env file once at startup.

    import envkit.autoload  # noqa: F401

The file and loader flags come from ``envkit.settings.load_settings``
(``.env`` with override on, unless configured otherwise).
"""

from __future__ import annotations

from envkit.env import init_env
from envkit.settings import load_settings

_settings = load_settings()
init_env(_settings.env_file, override=_settings.override, strict=_settings.strict)
