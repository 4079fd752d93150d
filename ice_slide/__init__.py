"""Ice Slide: a two-player turn-based sliding puzzle engine.

The public entry point is :class:`ice_slide.engine.TurnEngine`; see
:mod:`ice_slide.step` for the pure reducer it sequences.
"""
