"""HTML embed snippet for a resolved playback URL."""

from __future__ import annotations

from html import escape

_IFRAME_TEMPLATE = """<!-- streamgate player -->
<iframe
  src="{src}"
  width="{width}"
  height="{height}"
  frameborder="0"
  allowfullscreen
  allow="autoplay; fullscreen; picture-in-picture">
</iframe>"""


def render_iframe_embed(url: str, *, width: int = 640, height: int = 360) -> str:
    """Render the copy-paste iframe snippet for ``url``.

    Args:
        url: Playback URL (any DeliveryTarget mode).
        width: Iframe width in pixels.
        height: Iframe height in pixels.

    Returns:
        HTML snippet; ``""`` when there is no URL to embed.
    """
    if not url:
        return ""
    return _IFRAME_TEMPLATE.format(
        src=escape(url, quote=True), width=int(width), height=int(height)
    )
