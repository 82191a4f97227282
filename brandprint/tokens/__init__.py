"""Design-token extractors.

Each extractor is a pure function ``(doc, sheet=None) -> value`` that
tolerates a missing style tree.
"""

from brandprint.tokens.branding import (
    analyze_brand_imagery,
    extract_logo,
    extract_messaging,
    preview_markup,
    raw_style_excerpt,
)
from brandprint.tokens.colors import brand_colors, color_usage, extract_colors, primary_colors
from brandprint.tokens.components import (
    extract_buttons,
    extract_cards,
    extract_form_fields,
    extract_form_schema,
    extract_icons,
    extract_images,
    extract_navigation,
)
from brandprint.tokens.layout import analyze_grid_system, analyze_layout_structure, extract_breakpoints
from brandprint.tokens.spacing import extract_margins, extract_paddings, extract_spacing_scale
from brandprint.tokens.typography import (
    extract_font_families,
    extract_font_sizes,
    extract_font_weights,
    extract_headings,
    extract_text_samples,
)
from brandprint.tokens.variables import extract_css_variables

__all__ = [
    "analyze_brand_imagery",
    "analyze_grid_system",
    "analyze_layout_structure",
    "brand_colors",
    "color_usage",
    "extract_breakpoints",
    "extract_buttons",
    "extract_cards",
    "extract_colors",
    "extract_css_variables",
    "extract_font_families",
    "extract_font_sizes",
    "extract_font_weights",
    "extract_form_fields",
    "extract_form_schema",
    "extract_headings",
    "extract_icons",
    "extract_images",
    "extract_logo",
    "extract_margins",
    "extract_messaging",
    "extract_navigation",
    "extract_paddings",
    "extract_spacing_scale",
    "extract_text_samples",
    "preview_markup",
    "primary_colors",
    "raw_style_excerpt",
]
