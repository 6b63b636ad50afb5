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
from obarec import classtools
from obarec.term import recursion_term

def merge_terms(terms):
    """
    Merges terms with the same integral and the same multiset of factors
    by summing their prefactors. The merged terms are returned in order of
    first appearance and may have a zero prefactor.
    """
    merged = {}
    signatures = []
    for term in terms:
        signature = term.signature()
        if signature in merged:
            first = merged[signature]
            merged[signature] = recursion_term( first.integral(), first.factors(),\
                                                first.prefactor() + term.prefactor() )
        else:
            merged[signature] = term
            signatures.append( signature )
    return [ merged[s] for s in signatures ]

class recursion_distribution(classtools.classtools):
    """
    Accumulator for the expansion of one integral component: the root term
    which is being expanded and the ordered list of terms it expands into.

    A distribution with no expansion terms has not been expanded yet.

    Implementation notes:
        * Expansion terms are appended by the recursion drivers and may
          contain duplicates until simplify() is called.
        * The order of terms after simplify() is the order in which their
          signatures first appeared, so the output is reproducible.
    """
    def __init__(self,root,terms=None):
        assert isinstance(root,recursion_term), 'root must be a recursion_term'
        self._root = root
        self._terms = []
        if terms is not None:
            for term in terms:
                self.add(term)

    def __repr__(self):
        return 'recursion_distribution('+self._root.label()+', '+str(len(self._terms))+' terms)'

    def __getitem__(self,index):
        return self._terms[index]

    def __iter__(self):
        return iter( self._terms )

    def __eq__(self,other):
        if not isinstance(other,recursion_distribution):
            return NotImplemented
        return self._root == other._root and self._terms == other._terms

    def __ne__(self,other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def root(self):
        return self._root

    def terms(self):
        """Number of expansion terms."""
        return len( self._terms )

    def expansion(self):
        return list( self._terms )

    def empty(self):
        return len( self._terms ) == 0

    def add(self,term):
        assert isinstance(term,recursion_term), 'term must be a recursion_term'
        self._terms.append( term )

    def auxilary(self,center):
        """True if all expansion terms (or, for an unexpanded distribution, the
        root) need no further recursion on center."""
        if self.empty():
            return self._root.auxilary(center)
        for term in self._terms:
            if not term.auxilary(center):
                return False
        return True

    def simplify(self):
        """
        Merges expansion terms with the same integral and the same multiset
        of factors by summing their prefactors, and removes terms whose
        summed prefactor is zero.
        """
        self._terms = [ t for t in merge_terms( self._terms ) if not t.is_zero() ]

    def unique_integrals(self):
        """Distinct integral components referenced by the expansion, in order
        of first appearance."""
        out = []
        seen = set()
        for term in self._terms:
            if term.integral() not in seen:
                seen.add( term.integral() )
                out.append( term.integral() )
        return out
