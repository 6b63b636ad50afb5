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
Define set of modules that are imported when
   import obarec
is used in an input script

All identifiers are imported into the global namespace for ease of scripting.
To minimize the possibility of namespace collisions, the identifiers must
be explicitly included in following from ... import statements.
"""
from .tensor import tensor, tensor_component, cartesian_components
from .rational import rational
from .factor import factor
from .operator import operator_component
from .integral import integral_component, integral_class, derivative, no_derivative
from .term import recursion_term
from .distribution import recursion_distribution
from .group import recursion_group, group_container
from .graph import recursion_graph
from .errors import RecursionConsistencyError, UnknownFamilyError
from .families import operator_family, register_family, find_family, is_known_integrand
from .generator.generator import generator, generator_options, recursion_request, \
    create_recursion, read_requests
