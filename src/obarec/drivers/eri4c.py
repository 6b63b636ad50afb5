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
Recursion for four-center electron repulsion integrals ( a b | 1/|r-r'| | c d ).

The recursion is split into horizontal steps (HRR), which move angular
momentum from a to b and from c to d, and vertical steps (VRR), which
reduce b and d to s functions with increasing Boys order:

    bra HRR:  ( a+1_i b | c d ) = ( a b+1_i | c d ) + BA_i ( a b | c d )
    ket HRR:  ( 0 b | c+1_i d ) = ( 0 b | c d+1_i ) + DC_i ( 0 b | c d )
    bra VRR:  ( 0 b+1_i | 0 d )^(m) = PB_i ( 0 b | 0 d )^(m) + WP_i ( 0 b | 0 d )^(m+1)
                  + b_i/eta [ ( 0 b-1_i | 0 d )^(m) - rho/eta ( 0 b-1_i | 0 d )^(m+1) ]
                  + d_i/(eta+nu) ( 0 b | 0 d-1_i )^(m+1)
    ket VRR:  ( 0 0 | 0 d+1_i )^(m) = QD_i ( 0 0 | 0 d )^(m) + WQ_i ( 0 0 | 0 d )^(m+1)
                  + d_i/nu [ ( 0 0 | 0 d-1_i )^(m) - rho/nu ( 0 0 | 0 d-1_i )^(m+1) ]

Besides the component-wise recursion provided by the recursion_driver
base class, create_graph() builds the recursion as a graph of integral
classes, in which every vertex is expanded by a single step and
intermediate classes shared by several parents are expanded once.
"""
from obarec.factor import factor
from obarec.integral import integral_class
from obarec.term import recursion_term
from obarec.distribution import recursion_distribution
from obarec.group import recursion_group
from obarec.graph import recursion_graph
from obarec.drivers.base import recursion_driver
from obarec.drivers.eri import ERI_INTEGRAND

def unexpanded_group(components):
    """Recursion group with one unexpanded distribution per component."""
    group = recursion_group()
    for component in components:
        group.add( recursion_distribution( recursion_term(component) ) )
    return group

class four_center_electron_repulsion_driver(recursion_driver):
    integrand_name = ERI_INTEGRAND
    ncenters = 4

    def bra_hrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,0)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        dist.add( tval.add( factor('BA','rba',self.coord(axis)) ) )
        dist.add( tval.shift(axis,1,1) )
        return dist

    def ket_hrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,2)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        dist.add( tval.add( factor('DC','rdc',self.coord(axis)) ) )
        dist.add( tval.shift(axis,1,3) )
        return dist

    def bra_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,1)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        coord = self.coord(axis)
        dist.add( tval.add( factor('PB','pb',coord) ) )
        dist.add( tval.shift_order(1).add( factor('WP','wp',coord) ) )
        nb = tval[1][axis]
        r3val = tval.shift(axis,-1,1)
        if r3val is not None:
            dist.add( r3val.add( factor('1/eta','fi_ab'), nb ) )
            dist.add( r3val.shift_order(1).add( factor('rho/eta','fti_ab'), -nb ) )
        for center in ( 2, 3 ):
            xval = tval.shift(axis,-1,center)
            if xval is not None:
                dist.add( xval.shift_order(1).add( factor('1/(eta+nu)','fi_abcd'), tval[center][axis] ) )
        return dist

    def ket_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,3)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        coord = self.coord(axis)
        dist.add( tval.add( factor('QD','qd',coord) ) )
        dist.add( tval.shift_order(1).add( factor('WQ','wq',coord) ) )
        nd = tval[3][axis]
        r3val = tval.shift(axis,-1,3)
        if r3val is not None:
            dist.add( r3val.add( factor('1/nu','fi_cd'), nd ) )
            dist.add( r3val.shift_order(1).add( factor('rho/nu','fti_cd'), -nd ) )
        return dist

    def steps(self,integral):
        return [ ( 0, self.bra_hrr ), ( 2, self.ket_hrr ), ( 1, self.bra_vrr ), ( 3, self.ket_vrr ) ]

    def stage(self,iclass):
        """
        Single recursion step used to expand all components of iclass in
        the recursion graph, or None for the ( ss | ss )^(m) leaves.
        """
        anga, angb, angc, angd = iclass.angular_momenta()
        if anga > 0:
            return self.bra_hrr
        if angc > 0:
            return self.ket_hrr
        if angb > 0:
            return self.bra_vrr
        if angd > 0:
            return self.ket_vrr
        return None

    def expand_vertex(self,vertex,memo):
        """
        Returns vertex with each distribution expanded by one recursion
        step, or None if vertex holds leaves. memo maps integral components
        to their expansion, so that a component is expanded only once.
        """
        rewrite = self.stage( vertex.base() )
        if rewrite is None:
            return None
        group = recursion_group()
        for dist in vertex:
            integral = dist.root().integral()
            if integral not in memo:
                expansion = self.apply_best( dist.root(), rewrite )
                expansion.simplify()
                memo[integral] = expansion
            group.add( memo[integral] )
        return group

    def create_graph(self,anga,angb,angc,angd):
        """
        Recursion graph for the integral class ( AB | CD ). Vertices are
        expanded in order of creation; the children of a vertex are the
        integral classes referenced by its expansion. Leaves ( ss | ss )^(m)
        remain unexpanded, so orphans() of the result lists the leaves.
        The graph is reduced and sorted with children first.
        """
        root = integral_class( [ anga, angb, angc, angd ], ERI_INTEGRAND, bra_size = 2 )
        graph = recursion_graph( unexpanded_group( root.components() ) )
        memo = {}
        index = 0
        while index < graph.vertices():
            group = self.expand_vertex( graph[index], memo )
            if group is not None:
                graph.replace( group, index )
                for iclass, components in group.split_terms().items():
                    graph.add( unexpanded_group(components), index )
            index += 1
        graph.reduce()
        graph.sort()
        return graph

    def create_graphs(self,max_angular_momentum):
        """
        Recursion graphs for all canonical integral classes ( AB | CD ) up
        to max_angular_momentum, i.e. with A >= B, C >= D and
        ( A, B ) >= ( C, D ). Returns a list of ( integral_class, graph ) tuples.
        """
        assert isinstance(max_angular_momentum,int) and max_angular_momentum >= 0,\
                'max_angular_momentum must be a non-negative integer'
        pairs = [ ( a, b ) for a in range( max_angular_momentum+1 ) for b in range( a+1 ) ]
        out = []
        for i, bra in enumerate( pairs ):
            for ket in pairs[ :i+1 ]:
                iclass = integral_class( list( bra+ket ), ERI_INTEGRAND, bra_size = 2 )
                out.append( ( iclass, self.create_graph( *( bra+ket ) ) ) )
        return out
