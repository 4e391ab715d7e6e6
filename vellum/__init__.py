"""
VELLUM - Visual Engine for Layout of Lifelong User Milestones

A configurable resume composition engine that turns structured resume content
plus a flat, user-editable layout configuration into a styled render tree.

Architecture:
- Content Context: Resume data model, YAML loading and structural validation
- Layout Context: Configuration cascade, theme presets, templates, section ordering
- Composition Context: Style primitives, section renderers and the render tree
- Rendering Context: Render tree export and HTML preview
"""

__version__ = "0.1.0"
