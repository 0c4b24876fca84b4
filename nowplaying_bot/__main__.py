"""Allow ``python -m nowplaying_bot``."""

from nowplaying_bot.main import main

main()
