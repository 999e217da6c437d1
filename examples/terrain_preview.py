import pyterranoise as ptn
import matplotlib.pyplot as plt
import numpy as np

ptn.setup_logging()

nx, ny = 256, 256

perlin = ptn.terrain.sample_heightfield("perlin", nx, ny)
simplex = ptn.terrain.sample_heightfield("simplex", nx, ny)
ds = ptn.terrain.sample_heightfield("diamond_square", nx, ny, roughness=0.6, seed=7, wrap=True)

# ds = ptn.noise.diamond_square_generate(257, roughness=0.5, seed=7)

fig, axes = plt.subplots(2, 3, figsize=(13, 8))
for ax_h, ax_c, (name, z) in zip(axes[0], axes[1], [("Perlin", perlin), ("Simplex", simplex), ("Diamond-Square", ds)]):
	ax_h.imshow(z, cmap="gray", vmin=0, vmax=1)
	ax_h.set_title(f"{name} ({z.min():.2f}-{z.max():.2f})")
	ax_c.imshow(ptn.terrain.colorize(z))
	for ax in (ax_h, ax_c):
		ax.set_xticks([])
		ax.set_yticks([])

mesh = ptn.terrain.build_terrain_mesh(simplex)
print(f"Simplex mesh: {mesh.vertex_count} vertices, {mesh.triangle_count} triangles")
print("Interleaved buffer:", mesh.interleaved().shape, mesh.interleaved().dtype)

# Edge wrap-around only changes how border cells find their neighbours
wrapped = ptn.noise.diamond_square_generate(129, roughness=0.6, seed=7, wrap=True)
clamped = ptn.noise.diamond_square_generate(129, roughness=0.6, seed=7, wrap=False)
print("Mean |wrap - no wrap|:", np.abs(wrapped - clamped).mean())

plt.tight_layout()
plt.show()
