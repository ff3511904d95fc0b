"""
Background stylesheet: tiles the pattern behind the editor's text area and fades it
with a low-opacity overlay. Opacity always passes through clamp_opacity.
"""
import base64

from ..color.utils import clamp_opacity

DEFAULT_PATTERN_URL = "../assets/background-pattern.svg"
DEFAULT_OPACITY = 0.05
DEFAULT_BLEND_MODE = "lighten"

_TEMPLATE = """\
/* Kiroween background pattern for the editor text area */
.monaco-editor .view-lines {{
  background-image: url('{url}');
  background-repeat: repeat;
  background-size: {size}px {size}px;
  background-position: center;
  background-attachment: local;
}}

.monaco-editor .view-lines::before {{
  content: '';
  position: absolute;
  top: 0;
  left: 0;
  right: 0;
  bottom: 0;
  background: inherit;
  opacity: {opacity};
  mix-blend-mode: {blend_mode};
  pointer-events: none;
  z-index: -1;
}}
"""


def render_background_css(
    pattern_url: str = DEFAULT_PATTERN_URL,
    tile_size: int = 400,
    opacity: float = DEFAULT_OPACITY,
    blend_mode: str = DEFAULT_BLEND_MODE,
) -> str:
    return _TEMPLATE.format(
        url=pattern_url,
        size=tile_size,
        opacity=f"{clamp_opacity(opacity):g}",
        blend_mode=blend_mode,
    )


def pattern_data_uri(svg_text: str) -> str:
    """Embed the tile as a base64 data: URI."""
    encoded = base64.b64encode(svg_text.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


def render_inline_css(
    svg_text: str,
    tile_size: int = 400,
    opacity: float = DEFAULT_OPACITY,
    blend_mode: str = DEFAULT_BLEND_MODE,
) -> str:
    """Same stylesheet with the tile embedded, for hosts that cannot resolve relative URLs."""
    return render_background_css(pattern_data_uri(svg_text), tile_size, opacity, blend_mode)
