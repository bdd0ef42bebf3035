"""Grid storage primitives for roguelike-style applications."""
