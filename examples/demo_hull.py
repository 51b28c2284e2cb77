import logging

from cg2d.geom import points_from_xy
from cg2d.hull import ConvexHull2D
from cg2d.pointset import PointSet

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    raw = [
        (0, 0), (2, 0), (2, 2), (0, 2),
        (1, 1), (0.5, 1.5), (1, 0),   # внутрішня + точка на ребрі
    ]
    hull = ConvexHull2D(points_from_xy(raw))
    print("HULL:", [tuple(p) for p in hull.vertices()])
    print("TYPE:", hull.label(), "/", hull.description())
    print("AREA:", hull.area())
    print("VALIDATION:", hull.validate())

    # сховище: кожна зміна перераховує оболонку
    ps = PointSet()
    for x, y in [(-1.5, 0.0), (0.0, -2.25), (1.5, 0.0)]:
        ps.add(x, y)
    print(ps.version, ps.description, [p.id for p in ps.hull])
    origin = ps.add(0.0, 0.0)
    top = ps.add(0.0, 2.25)
    print(ps.version, ps.description, [p.id for p in ps.hull])
    ps.edit(origin.id, 3.0, 3.0)
    print(ps.version, ps.description, [p.id for p in ps.hull])
    ps.delete(top.id)
    print(ps.version, ps.description, [p.id for p in ps.hull])
