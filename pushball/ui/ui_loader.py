"""
ui_loader.py
------------
Loads HUD layouts from YAML files and instantiates their elements.
"""

from pathlib import Path
from typing import Any, Dict, List

import yaml

from pushball.core.debug.debug_logger import DebugLogger
from pushball.core.runtime.game_settings import Layers
from pushball.ui.ui_element import UIElement

UI_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config" / "ui"

# Element type registry
ELEMENT_REGISTRY = {}


def register_element(type_name: str):
    """Decorator to register element types."""

    def decorator(cls):
        ELEMENT_REGISTRY[type_name] = cls
        return cls

    return decorator


class UILoader:
    """Loads and parses HUD configurations from YAML files."""

    def __init__(self, base_path=UI_CONFIG_DIR):
        self.base_path = Path(base_path)
        self.cache: Dict[str, Dict] = {}

    def load(self, filename: str) -> List[UIElement]:
        """
        Load a HUD layout.

        Args:
            filename: YAML file relative to the ui config directory

        Returns:
            list[UIElement]: Elements in file order

        Raises:
            FileNotFoundError: If the layout file does not exist
        """
        if filename not in self.cache:
            full_path = self.base_path / filename
            if not full_path.exists():
                raise FileNotFoundError(f"ui config not found: {full_path}")

            with open(full_path, 'r', encoding='utf-8') as f:
                self.cache[filename] = yaml.safe_load(f) or {}

            DebugLogger.init_sub(f"Parsed {filename}")

        return self.load_from_dict(self.cache[filename])

    def load_from_dict(self, config: Dict[str, Any]) -> List[UIElement]:
        """Instantiate the 'elements' list of a parsed layout."""
        elements = []
        for element_config in config.get('elements', []):
            element_config = self._resolve_layer_names(dict(element_config))
            element_type = element_config.get('type', 'element')
            element_class = ELEMENT_REGISTRY.get(element_type)
            if element_class is None:
                DebugLogger.warn(f"Unknown element type '{element_type}', using base element", category="ui")
                element_class = UIElement
            elements.append(element_class(element_config))
        return elements

    def clear_cache(self):
        """Clear the configuration cache."""
        self.cache.clear()

    def _resolve_layer_names(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Convert 'Layers.NAME' strings in graphic.layer to numeric values.

        Args:
            config: Element configuration dictionary

        Returns:
            Config with resolved layer value
        """
        graphic = config.get('graphic')
        if not graphic or not isinstance(graphic.get('layer'), str):
            return config

        graphic = dict(graphic)
        layer_str = graphic['layer'].strip()
        name = layer_str.split('.', 1)[-1]
        value = getattr(Layers, name, None)

        if isinstance(value, int):
            graphic['layer'] = value
        else:
            DebugLogger.warn(f"Unknown layer '{layer_str}', using Layers.UI", category="ui")
            graphic['layer'] = Layers.UI

        config['graphic'] = graphic
        return config


# Register base element type
register_element('element')(UIElement)
