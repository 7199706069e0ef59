from lifecycleview.ui.widgets.diagram_view import DiagramView
from lifecycleview.ui.widgets.footer import Footer
from lifecycleview.ui.widgets.options_panel import OptionsPanel
from lifecycleview.ui.widgets.translated_label import T, TranslatedLabel

__all__ = [
    "DiagramView",
    "Footer",
    "OptionsPanel",
    "T",
    "TranslatedLabel",
]
