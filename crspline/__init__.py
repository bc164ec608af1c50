'''
# crspline

Catmull-Rom splines through 3D control points, tesselated into a dense series
of samples with positions, tangents, normals, and arc lengths.

 - crspline.catmull_rom: the CatmullRom class, which owns a set of control points
   and curve settings and regenerates the sampled curve whenever they change.
 - crspline.hermite: evaluation of single cubic Hermite segments (position,
   derivative, tangent, normal, arc length).
 - crspline.tangents: Catmull-Rom tangent estimation from neighboring control points.
 - crspline.generate: tesselation of a whole spline into SplinePoints arrays.
 - crspline.query: position lookups, lengths, resampling, and closest points over
   generated samples.
 - crspline.draw: line segments and normal/tangent rays for debug drawing.
 - crspline.geometry: basic algorithms for polyline curves.
'''
