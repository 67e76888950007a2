class Preset:
    name = "preset"

    def apply(self, grid, center, radius):
        """
        Clear `grid` and mark this preset's pattern on it.
        `center` is the trap centre (Vec2) and `radius` the trap boundary radius.
        """
        grid.clear()
        self.mark(grid, center, radius)

    def mark(self, grid, center, radius):
        """
        Placeholder for a preset pattern.
        """
        pass

    def __repr__(self):
        return f"<{self.__class__.__name__} name={self.name}>"

    def __str__(self):
        return self.__repr__()
