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
from obarec.factor import factor
from obarec.distribution import recursion_distribution
from obarec.drivers.base import recursion_driver

# Exponent factor of the Gaussian on each center
CENTER_EXPONENTS = [ ( 'ba_e', 'a_exp' ), ( 'bb_e', 'b_exp' ), ( 'kc_e', 'c_exps' ), ( 'kd_e', 'd_exps' ) ]

class center_derivative_driver(recursion_driver):
    """
    Geometric derivative driver. Derivatives with respect to the position
    of a center are moved onto the Gaussian on that center:

        d/dA_i ( a | O | b ) = 2 a_e ( a+1_i | O | b ) - a_i ( a-1_i | O | b )

    which works for any integrand and any number of centers. The prefixes
    of a term are lowered one at a time, from the last center to the first,
    and terms without prefixes are left to the driver of their integrand.
    """
    def is_family(self,term):
        return not term.prefixes().empty()

    def is_auxilary(self,term,center):
        return term.prefixes().empty() or term.prefixes().shape(center).order() == 0

    def is_base_case(self,term):
        return term.prefixes().empty()

    def center_vrr(self,term,axis,center):
        if not self.is_family(term):
            return None
        tval = term.shift_prefix(axis,-1,center,clear_if_auxiliary=True)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        name, label = CENTER_EXPONENTS[center]
        dist.add( tval.shift(axis,1,center).add( factor(name,label), 2 ) )
        rval = tval.shift(axis,-1,center)
        if rval is not None:
            dist.add( rval.scale( -tval[center][axis] ) )
        return dist

    def _rewrite(self,center):
        def rewrite(term,axis):
            return self.center_vrr(term,axis,center)
        return rewrite

    def steps(self,integral):
        return [ ( center, self._rewrite(center) ) \
                 for center in reversed( range( integral.ncenters() ) ) ]
