"""Layers and the ordered stack that runs them, overlays on top."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Layer:
    """A unit of per-frame work; subclasses override the hooks they need.

    The base hooks keep simple bookkeeping: whether the layer is attached,
    how much time and how many frames, events and renders it has seen.
    """

    def __init__(self, name: str = "layer") -> None:
        self.name = name
        self.enabled = False
        self.elapsed_time = 0.0
        self.frame_count = 0
        self.event_count = 0
        self.render_count = 0

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack; marks it enabled."""
        self.enabled = True

    def on_detach(self) -> None:
        """Called when the layer is popped from a stack; marks it disabled."""
        self.enabled = False

    def on_update(self, delta_time: float = 0.0) -> None:
        """Called once per frame; accumulates frame time and count."""
        self.elapsed_time += delta_time
        self.frame_count += 1

    def on_event(self, event: Any) -> None:
        """Called for every event dispatched to the layer; counts it."""
        self.event_count += 1

    def on_imgui_render(self) -> None:
        """Called when the user interface is drawn; counts the render."""
        self.render_count += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Layers in order, with overlays always kept after regular layers."""

    def __init__(self) -> None:
        self.layers: list[Layer] = []
        self._insert = 0

    def _position(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self.layers) if item is layer), None)

    def push_layer(self, layer: Layer) -> None:
        """Insert ``layer`` after the existing layers but before any overlay."""
        self.layers.insert(self._insert, layer)
        self._insert += 1
        layer.on_attach()

    def pop_layer(self, layer: Layer) -> None:
        """Remove ``layer`` if present and detach it."""
        position = self._position(layer)
        if position is None:
            return
        del self.layers[position]
        self._insert -= 1
        layer.on_detach()

    def push_overlay(self, overlay: Layer) -> None:
        """Append ``overlay`` on top of everything else."""
        self.layers.append(overlay)
        overlay.on_attach()

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove ``overlay`` if present and detach it."""
        position = self._position(overlay)
        if position is None:
            return
        del self.layers[position]
        overlay.on_detach()

    def delete_all_layers(self) -> None:
        """Drop every layer and overlay without detaching them."""
        self.layers.clear()
        self._insert = 0

    def __iter__(self) -> Iterator[Layer]:
        return iter(self.layers)

    def __len__(self) -> int:
        return len(self.layers)