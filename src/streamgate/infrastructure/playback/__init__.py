from .bitrate_ladder import BitrateLadderBuilder
from .embed_code import render_iframe_embed
from .path_resolver import PathResolver

__all__ = ["BitrateLadderBuilder", "PathResolver", "render_iframe_embed"]
