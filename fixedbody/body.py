"""
This module defines the Body class, a simple data container for individual bodies
handed to the simulation as initial conditions.

The class stores mass, position (x, y, z) and velocity (vx, vy, vz) as floating-point
attributes and provides a readable string representation for debugging. Bodies are
copied into the simulation's numpy arrays on construction; later changes to a Body do
not reach the simulation. No units are assumed.
"""
class Body:
	def __init__(
		self,
		mass: float,
		x: float = 0.0,
		y: float = 0.0,
		z: float = 0.0,
		vx: float = 0.0,
		vy: float = 0.0,
		vz: float = 0.0,
	):
		self.mass = float(mass)
		self.x = float(x)
		self.y = float(y)
		self.z = float(z)
		self.vx = float(vx)
		self.vy = float(vy)
		self.vz = float(vz)

	@property
	def position(self) -> tuple:
		return (self.x, self.y, self.z)

	@property
	def velocity(self) -> tuple:
		return (self.vx, self.vy, self.vz)

	def __repr__(self) -> str:
		return (f"Body(mass={self.mass}, x={self.x}, y={self.y}, z={self.z}, "
				f"vx={self.vx}, vy={self.vy}, vz={self.vz})")
