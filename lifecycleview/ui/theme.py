"""Application-wide visual theme styling."""

from __future__ import annotations

from typing import Mapping

LIGHT_THEME = {
    "background": "white",
    "text": "black",
    "render": "rgb(217, 232, 253)",
    "pre_commit": "rgb(255, 242, 205)",
    "commit": "rgb(214, 231, 213)",
}

DARK_THEME = {
    "background": "#24292E",
    "text": "white",
    "render": "#24292E",
    "pre_commit": "#24292E",
    "commit": "#24292E",
}

FONTS = {
    "body": '"Noto Sans", "Segoe UI", "Helvetica Neue", sans-serif',
    "code": '"Fira Code", "Cascadia Code", "Consolas", monospace',
}


def build_stylesheet(
    roles: Mapping[str, str] | None = None,
    fonts: Mapping[str, str] | None = None,
) -> str:
    """Build the application stylesheet from a color-role mapping."""
    r = dict(LIGHT_THEME)
    if roles:
        r.update({k: v for k, v in roles.items() if isinstance(v, str) and v.strip()})
    f = dict(FONTS)
    if fonts:
        f.update({k: v for k, v in fonts.items() if isinstance(v, str) and v.strip()})

    return f"""
QWidget {{
    background-color: {r["background"]};
    color: {r["text"]};
    font-family: {f["body"]};
    font-size: 10pt;
}}

QLabel {{
    background-color: transparent;
}}

#DiagramTitle {{
    font-size: 18pt;
    font-weight: 600;
    padding: 8px 0;
}}

#OptionsPanel QComboBox, #OptionsPanel QCheckBox {{
    padding: 2px 6px;
}}

#StageHeader {{
    font-weight: 600;
    padding: 6px;
}}

#PhaseLabel {{
    font-style: italic;
    padding: 6px;
}}

#PhaseCell[phase="render"] {{
    background-color: {r["render"]};
}}

#PhaseCell[phase="pre_commit"] {{
    background-color: {r["pre_commit"]};
}}

#PhaseCell[phase="commit"] {{
    background-color: {r["commit"]};
}}

#MethodBox {{
    font-family: {f["code"]};
    border: 1px solid {r["text"]};
    border-radius: 4px;
    padding: 4px 8px;
}}

#MethodBox[advanced="true"] {{
    border-style: dashed;
}}

#VersionNotice {{
    font-style: italic;
}}

#Footer {{
    font-size: 9pt;
    padding: 12px 0;
}}
"""
