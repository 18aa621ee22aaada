"""Matrix and direction types shared by the renderers."""
