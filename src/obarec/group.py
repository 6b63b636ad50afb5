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
from collections import OrderedDict
from obarec import classtools
from obarec.distribution import recursion_distribution

class recursion_group(classtools.classtools):
    """
    List of recursion distributions, normally one per component of an
    integral class, which are expanded and emitted together.
    """
    def __init__(self,distributions=None):
        self._distributions = []
        if distributions is not None:
            for dist in distributions:
                self.add(dist)

    def __repr__(self):
        return 'recursion_group('+str(len(self._distributions))+' distributions)'

    def __getitem__(self,index):
        return self._distributions[index]

    def __iter__(self):
        return iter( self._distributions )

    def __eq__(self,other):
        if not isinstance(other,recursion_group):
            return NotImplemented
        return self._distributions == other._distributions

    def __ne__(self,other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def add(self,dist):
        assert isinstance(dist,recursion_distribution), 'dist must be a recursion_distribution'
        self._distributions.append( dist )

    def expansions(self):
        """Number of distributions in the group."""
        return len( self._distributions )

    def roots(self):
        return [ dist.root() for dist in self._distributions ]

    def simplify(self):
        for dist in self._distributions:
            dist.simplify()

    def auxilary(self,center):
        for dist in self._distributions:
            if not dist.auxilary(center):
                return False
        return True

    def empty(self):
        """True if any distribution in the group has not been expanded."""
        for dist in self._distributions:
            if dist.empty():
                return True
        return False

    def base(self):
        """Integral class of the roots of the group (None for an empty group)."""
        if len( self._distributions ) == 0:
            return None
        return self._distributions[0].root().integral().integral_class()

    def merge(self,other):
        """Adds the distributions of other whose roots are not yet present."""
        assert isinstance(other,recursion_group), 'other must be a recursion_group'
        roots = set( self.roots() )
        for dist in other:
            if dist.root() not in roots:
                roots.add( dist.root() )
                self.add( dist )

    def split_terms(self):
        """
        Returns an OrderedDict mapping each integral class referenced by the
        expansion terms of the group to the sorted list of distinct integral
        components of that class, with classes in order of first appearance.

        This allows every distinct sub-integral to be expanded once,
        whatever the number of terms referencing it.
        """
        out = OrderedDict()
        for dist in self._distributions:
            for integral in dist.unique_integrals():
                iclass = integral.integral_class()
                if iclass not in out:
                    out[iclass] = set()
                out[iclass].add( integral )
        for iclass in out:
            out[iclass] = sorted( out[iclass] )
        return out

class group_container(classtools.classtools):
    """Ordered collection of recursion groups."""
    def __init__(self,groups=None):
        self._groups = []
        if groups is not None:
            for group in groups:
                self.add(group)

    def __getitem__(self,index):
        return self._groups[index]

    def __iter__(self):
        return iter( self._groups )

    def __eq__(self,other):
        if not isinstance(other,group_container):
            return NotImplemented
        return self._groups == other._groups

    __hash__ = None

    def add(self,group):
        assert isinstance(group,recursion_group), 'group must be a recursion_group'
        self._groups.append( group )

    def replace(self,group,index):
        assert isinstance(group,recursion_group), 'group must be a recursion_group'
        self._groups[index] = group

    def recursion_groups(self):
        return len( self._groups )

    def reduce(self):
        """Merges groups with the same base integral class into the first such group."""
        new_groups = []
        index_by_base = {}
        for group in self._groups:
            base = group.base()
            if base in index_by_base:
                new_groups[ index_by_base[base] ].merge( group )
            else:
                index_by_base[base] = len( new_groups )
                new_groups.append( group )
        self._groups = new_groups

    def base(self):
        if len( self._groups ) == 0:
            return None
        return self._groups[0].base()
