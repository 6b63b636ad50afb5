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
Base class for the recursion drivers.

Each driver encodes the Obara-Saika type recursion relations for one
operator family as single-step rewrites of a recursion_term along one
Cartesian axis (methods named <side>_vrr or <side>_hrr, returning a
recursion_distribution or None). The base class supplies the machinery
common to all families:

    apply_best()        choose the axis giving the fewest terms
    apply_step()        fixed-point worklist for one recursion center
    apply_recursion()   all recursion steps of the driver, followed by
                        the drivers it delegates to
    create_recursion()  recursion group for a list of integral components

Implementation notes:
    * A driver only advances terms which pass its is_family() guard. Terms
      of other families (e.g. overlap terms produced by the kinetic energy
      recursion) are passed through unchanged and are reduced by the
      delegate drivers.
    * Rewrites which are not possible along an axis return None. A term
      which still needs recursion on a center but cannot be rewritten along
      any axis indicates an error in the recursion rules, and
      RecursionConsistencyError is raised rather than returning a partial
      expansion.
"""
from obarec import classtools
from obarec.tensor import AXES, axis_index, tensor_component
from obarec.term import recursion_term
from obarec.distribution import recursion_distribution, merge_terms
from obarec.group import recursion_group
from obarec.errors import RecursionConsistencyError

class recursion_driver(classtools.classtools):
    """
    Generic recursion driver. Subclasses set the class attributes below
    and implement steps().

    integrand_name:  name of the operator handled by the driver
    shaped:          True if the operator must have a nonzero tensorial
                     shape, False if the shape must be zero, None if
                     either is accepted
    ncenters:        number of centers of the integrals, or a tuple of the
                     accepted numbers of centers
    """
    integrand_name = None
    shaped = False
    ncenters = 2

    def __init__(self):
        self._rxyz = [ tensor_component(1,0,0), tensor_component(0,1,0), tensor_component(0,0,1) ]

    def coord(self,axis):
        """Unit tensor component along axis, the shape of directional factors."""
        return self._rxyz[ axis_index(axis) ]

    def is_family(self,term):
        """True if term is an untransformed integral handled by this driver."""
        if not term.prefixes().empty():
            return False
        ncenters = self.ncenters if isinstance(self.ncenters,tuple) else ( self.ncenters, )
        if term.integral().ncenters() not in ncenters:
            return False
        integrand = term.integrand()
        if integrand.name() != self.integrand_name:
            return False
        if self.shaped is True and integrand.shape().order() == 0:
            return False
        if self.shaped is False and integrand.shape().order() > 0:
            return False
        return True

    def is_auxilary(self,term,center):
        """True if term needs no further recursion on center."""
        return term.auxilary(center)

    def is_base_case(self,term):
        """True if term needs no further recursion by this driver."""
        for center in range( term.integral().ncenters() ):
            if not term.auxilary(center):
                return False
        return True

    def steps(self,integral):
        """
        List of ( center, rewrite ) tuples, applied in order by
        apply_recursion(). rewrite( term, axis ) returns a
        recursion_distribution or None.
        """
        return []

    def delegates(self):
        """Drivers applied after the recursion steps of this driver."""
        return []

    def apply_best(self,term,rewrite):
        """
        Applies rewrite along each axis (x, y, z) and returns the expansion
        with the fewest terms, the earlier axis winning ties.
        """
        if not self.is_family(term):
            raise RecursionConsistencyError(self.__class__.__name__+\
                    ' applied to a term outside its family', term)
        best = None
        for axis in AXES:
            candidate = rewrite(term,axis)
            if candidate is not None:
                if best is None or candidate.terms() < best.terms():
                    best = candidate
        if best is None:
            raise RecursionConsistencyError(self.__class__.__name__+\
                    ' found no recursion axis for a term which is not in a base case', term)
        return best

    def needs_step(self,term,center):
        return self.is_family(term) and not self.is_auxilary(term,center)

    def apply_step(self,dist,center,rewrite):
        """
        Expands all terms of dist which belong to the family of the driver
        and still need recursion on center, repeating until every term is
        auxiliary on center. Returns the resulting distribution (dist is
        returned unchanged if there is nothing to do).

        Terms with the same integral and factors are merged before each
        round, and the single step rewrite of each distinct integral is
        computed once and reused for every term referring to it.
        """
        queue = []
        done = []
        if dist.empty():
            if self.needs_step( dist.root(), center ):
                queue.append( dist.root() )
        else:
            for term in dist:
                if self.needs_step( term, center ):
                    queue.append( term )
                else:
                    done.append( term )
        if len( queue ) == 0:
            return dist
        steps = {}
        while len( queue ) > 0:
            new_queue = []
            for term in merge_terms( queue ):
                integral = term.integral()
                if integral not in steps:
                    steps[integral] = self.apply_best( recursion_term(integral), rewrite ).expansion()
                for step_term in steps[integral]:
                    new_term = term.multiply( step_term )
                    if self.needs_step( new_term, center ):
                        new_queue.append( new_term )
                    else:
                        done.append( new_term )
            queue = new_queue
        return recursion_distribution( dist.root(), merge_terms( done ) )

    def apply_recursion(self,dist):
        """Applies every recursion step of the driver, then the delegate drivers."""
        for center, rewrite in self.steps( dist.root().integral() ):
            dist = self.apply_step(dist,center,rewrite)
        for driver in self.delegates():
            dist = driver.apply_recursion(dist)
        return dist

    def apply_group(self,group):
        """Returns a new group with apply_recursion applied to each distribution."""
        new_group = recursion_group()
        for dist in group:
            new_group.add( self.apply_recursion(dist) )
        return new_group

    def create_recursion(self,components):
        """Returns the simplified recursion_group for a list of integral components."""
        group = recursion_group()
        for component in components:
            group.add( self.apply_recursion( recursion_distribution( recursion_term(component) ) ) )
        group.simplify()
        return group
