"""Chart styles and constants."""

# Fonts
FONT_FAMILY = "Inter, -apple-system, system-ui, Arial, sans-serif"
FONT_SIZE = 16

# Data colors (same for both themes)
COLORS_DATA = {
    "overturning": "#d62728",  # red
    "sliding": "#1f77b4",      # blue
    "bearing": "#9467bd",      # purple
    "footprint": "#2ca02c",    # green
    "thickness": "#ff7f0e",    # orange
    "winner": "#ffbf00",
    "pass_zone": "rgba(46, 204, 113, 0.12)",
    "fail_zone": "rgba(231, 76, 60, 0.18)",
}

# Light theme
COLORS_LIGHT = {
    **COLORS_DATA,
    "template": "plotly_white",
    "plot_bg": "white",
    "paper_bg": "white",
    "text": "black",
    "grid": "rgba(0,0,0,0.1)",
    "axis_line": "black",
    "axis_tick": "black",
    "legend_bg": "rgba(255,255,255,0.9)",
    "legend_border": "black",
    "annotation_bg": "rgba(255,255,255,0.8)",
    "marker_border": "black",
}

# Dark theme (Streamlit dark mode)
COLORS_DARK = {
    **COLORS_DATA,
    "template": "plotly_dark",
    "plot_bg": "rgba(14, 17, 23, 0)",
    "paper_bg": "rgba(14, 17, 23, 0)",
    "text": "#fafafa",
    "grid": "rgba(255,255,255,0.1)",
    "axis_line": "#fafafa",
    "axis_tick": "#fafafa",
    "legend_bg": "rgba(38, 39, 48, 0.9)",
    "legend_border": "#fafafa",
    "annotation_bg": "rgba(38, 39, 48, 0.8)",
    "marker_border": "#fafafa",
}

# Line widths
LINE_WIDTH_BOLD = 3
LINE_WIDTH_THIN = 2

# Labels per objective
LABELS = {
    "MinimizeExcavation": {
        "title_left": "<b>Factors of safety vs footing thickness</b>",
        "title_right": "<b>Footing size vs thickness</b>",
        "x_label": "<b>Footing thickness <i>t</i>, in</b>",
        "parameter": "t",
    },
    "MinimizeFooting": {
        "title_left": "<b>Factors of safety vs width step</b>",
        "title_right": "<b>Footing size vs width step</b>",
        "x_label": "<b>Width step <i>s</i>, in</b>",
        "parameter": "s",
    },
}

FACTOR_LABELS = {
    "overturning": "<i>FS</i><sub>ot</sub>",
    "sliding": "<i>FS</i><sub>sl</sub>",
    "bearing": "<i>FS</i><sub>b</sub>",
}
