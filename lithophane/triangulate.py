# Vertex-index routes per polygon arity. Only flat areas with 3 to 6 points
# around the perimeter are supported; anything else has no route.
ROUTES = {
    3: [(0, 1, 2)],
    4: [(0, 1, 2), (0, 2, 3)],
    5: [(0, 1, 4), (1, 2, 4), (2, 3, 4)],
    6: [(0, 1, 2), (2, 3, 5), (3, 4, 5), (5, 0, 2)],
}


def triangulate_area(area):
    route = ROUTES.get(len(area))
    if route is None:
        # Unsupported arity: the area is dropped without triangles
        return []
    return [(area[a], area[b], area[c]) for a, b, c in route]


def iter_triangles(areas):
    for area in areas:
        yield from triangulate_area(area)


def areas_to_triangles(areas):
    """Converts a list of point lists into a flat list of triangles."""
    return list(iter_triangles(areas))
