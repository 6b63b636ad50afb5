### LICENSE INFORMATION
### This file is part of Obarec, a molecular integral recursion compiler
### Copyright (C) 2016 James C. Womack
### 
### Obarec is free software: you can redistribute it and/or modify
### it under the terms of the GNU General Public License as published by
### the Free Software Foundation, either version 3 of the License, or
### (at your option) any later version.
### 
### Obarec is distributed in the hope that it will be useful,
### but WITHOUT ANY WARRANTY; without even the implied warranty of
### MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
### GNU General Public License for more details.
### 
### You should have received a copy of the GNU General Public License
### along with Obarec.  If not, see <http://www.gnu.org/licenses/>.
### 
### See the file named LICENSE for full details.
"""
Recursion drivers, one per operator family.
"""
from .base import recursion_driver
from .overlap import overlap_driver
from .kinetic import kinetic_energy_driver
from .npot import nuclear_potential_driver, nuclear_potential_geom_driver
from .multipole import multipole_driver
from .linmom import linear_momentum_driver
from .field import electric_field_driver
from .eri import electron_repulsion_driver, ERI_INTEGRAND
from .eri3c import three_center_electron_repulsion_driver
from .eri4c import four_center_electron_repulsion_driver
from .ecp import local_ecp_driver, projected_ecp_driver, reduced_projected_ecp_driver
from .center import center_derivative_driver
from .gaussian import three_center_overlap_driver, three_center_overlap_gradient_driver,\
        three_center_r2_driver, three_center_rr2_driver, GAUSSIAN_INTEGRAND
