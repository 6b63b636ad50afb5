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
# General, simple, functions that support existing code and do not depend on
# any other modules

def isinstance_list(obj,type_list):
    """Allows builtin isinstance() to take a list of types, rather than
    a tuple."""
    assert isinstance( type_list, list )
    return isinstance(obj,tuple( x for x in type_list) )

def topological_sort(dependencies):
    """
    Returns a list of node indexes ordered so that every node appears after
    all nodes it depends on.

    dependencies:   list with one entry per node, each an iterable of the
                    indexes of the nodes it depends on

    Nodes without dependencies are placed on a stack ("orphans"); a node is
    pushed onto the stack once all of its dependencies have been placed. If
    the stack empties before all nodes have been placed, the dependency
    graph contains a cycle and an exception is raised.
    """
    nnodes = len( dependencies )
    remaining = [ set( d ) for d in dependencies ]
    dependants = [ [] for i in range( nnodes ) ]
    for i in range( nnodes ):
        for j in remaining[i]:
            assert 0 <= j < nnodes, 'dependency index out of range'
            dependants[j].append( i )
    # Collect all nodes which have no dependencies, lowest index on top of stack
    stack = [ i for i in reversed( range( nnodes ) ) if len( remaining[i] ) == 0 ]
    ordered = []
    while len( stack ) > 0:
        node = stack.pop()
        ordered.append( node )
        for child in sorted( dependants[node], reverse = True ):
            remaining[child].discard( node )
            if len( remaining[child] ) == 0:
                stack.append( child )
    if len( ordered ) != nnodes:
        raise Exception('Topological sort failed! Possible circular dependencies.')
    return ordered
