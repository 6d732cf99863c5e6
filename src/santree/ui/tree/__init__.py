"""Move-tree diagram: layout, scene, and view."""
