import math


class Vec2:
    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def length(self):
        return math.hypot(self.x, self.y)

    def length_sq(self):
        return self.x * self.x + self.y * self.y

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def distance_to(self, other):
        return math.hypot(other.x - self.x, other.y - self.y)

    def normalize(self):
        l = self.length()
        if l > 0.0:
            return Vec2(self.x / l, self.y / l)
        return Vec2(0.0, 0.0)

    def with_length(self, length):
        """Same direction, new length. A negative length flips the direction; zero stays zero."""
        n = self.normalize()
        return Vec2(n.x * length, n.y * length)

    def limited(self, max_length):
        l_sq = self.length_sq()
        if l_sq > max_length * max_length:
            scale = max_length / math.sqrt(l_sq)
            v = Vec2(self.x * scale, self.y * scale)
            # rounding can land one ulp above the cap; step the scale down until it fits
            while v.length() > max_length:
                scale = math.nextafter(scale, 0.0)
                v = Vec2(self.x * scale, self.y * scale)
            return v
        return self.copy()

    def rotated(self, angle):
        """Rotate by `angle` radians (counterclockwise in math axes, clockwise on a y-down screen)."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Vec2(self.x * c - self.y * s, self.x * s + self.y * c)

    # in-place variants, each returns self so calls can be chained

    def set_length(self, length):
        v = self.with_length(length)
        self.x, self.y = v.x, v.y
        return self

    def limit_in_place(self, max_length):
        v = self.limited(max_length)
        self.x, self.y = v.x, v.y
        return self

    def rotate_in_place(self, angle):
        v = self.rotated(angle)
        self.x, self.y = v.x, v.y
        return self

    def copy(self):
        return Vec2(self.x, self.y)

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Vec2({self.x:.3f}, {self.y:.3f})"
