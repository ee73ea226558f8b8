"""Content types for browser game assets.

Starlette's FileResponse guesses the content type through the stdlib
``mimetypes`` registry, which reads the host's mime database. Some hosts
lack ``.wasm`` entirely or map ``.js`` to something odd, and browsers refuse
``WebAssembly.instantiateStreaming`` unless the module is ``application/wasm``.
"""

import mimetypes

GAME_MEDIA_TYPES = {
    ".wasm": "application/wasm",
    ".js": "text/javascript",
    ".mjs": "text/javascript",
}


def register_media_types() -> None:
    """Add the game asset types to the process-wide mimetypes registry."""
    for extension, media_type in GAME_MEDIA_TYPES.items():
        mimetypes.add_type(media_type, extension)
