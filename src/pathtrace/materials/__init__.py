from pathtrace.materials.material import Material
from pathtrace.materials.diffuse import Diffuse
from pathtrace.materials.mirror import Mirror
