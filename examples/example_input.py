#!/usr/bin/env python3
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
EXAMPLE INPUT SCRIPT FOR OBAREC

In order for the script to correctly import the obarec modules, you
must either install the package (pip install .), run this script in the
src/ directory containing the obarec source code, or add this directory to
your shell's PYTHONPATH environment variable, e.g.
  export PYTHONPATH=$PYTHONPATH:${REPODIR}/src
where ${REPODIR} is the directory into which the Obarec repository has
been cloned.

To execute the script run it via the Python 3 interpreter:
  python3 example_input.py
The expanded recursions are written to the file "recursions.txt" in the
current working directory.

The script requests the recursions for two-center overlap and nuclear
attraction integrals, a geometric derivative of the kinetic energy
integrals and a four-center electron repulsion integral class, for which
the recursion graph is also built.
"""

# Import modules
from obarec import *
from obarec.drivers import ERI_INTEGRAND

# Integral classes to be expanded
overlap_pd = recursion_request( '1', [ 1, 2 ] )
nuclear_dd = recursion_request( 'A', [ 2, 2 ] )
# Kinetic energy integrals differentiated once with respect to center a
kinetic_pp_da = recursion_request( 'T', [ 1, 1 ], prefix_orders = [ 1, 0 ] )
# Dipole integrals
dipole_ps = recursion_request( 'r', [ 1, 0 ], operator_order = 1 )
# ( ps | ps ) electron repulsion integrals
eri_psps = recursion_request( ERI_INTEGRAND, [ 1, 0, 1, 0 ] )

### Set generator options and create generator object ###
options = generator_options( build_graphs = True )
gen = generator( overlap_pd, nuclear_dd, kinetic_pp_da, dipole_ps, eri_psps, opt = options )
with open( 'recursions.txt', 'w' ) as output_file:
    gen.out( output_file )
