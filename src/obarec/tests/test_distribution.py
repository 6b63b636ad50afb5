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
import unittest
from obarec.tensor import tensor_component
from obarec.operator import operator_component
from obarec.integral import integral_component
from obarec.factor import factor
from obarec.rational import rational
from obarec.term import recursion_term
from obarec.distribution import recursion_distribution, merge_terms

s = tensor_component()
px = tensor_component(1,0,0)
dxx = tensor_component(2,0,0)

def term(a,b):
    return recursion_term( integral_component( [ a, b ], operator_component('1') ) )

class TestDistribution(unittest.TestCase):
    """Tests for the recursion_distribution class."""
    def setUp(self):
        self.rpa = factor('PA','rpa',px)
        self.fe = factor('1/eta','fe')

    def tearDown(self):
        pass

    def test_distribution(self):
        dist = recursion_distribution( term(dxx,s) )
        self.assertTrue( dist.empty() )
        self.assertEqual( dist.terms(), 0 )
        self.assertFalse( dist.auxilary(0) )
        self.assertTrue( dist.auxilary(1) )
        dist.add( term(px,s).add( self.rpa ) )
        dist.add( term(s,s).add( self.fe, 2 ) )
        self.assertFalse( dist.empty() )
        self.assertEqual( dist.terms(), 2 )
        self.assertEqual( dist[1], term(s,s).add( self.fe, 2 ) )
        self.assertEqual( [ t for t in dist ], dist.expansion() )
        self.assertFalse( dist.auxilary(0) )
        self.assertEqual( dist.unique_integrals(), [ term(px,s).integral(), term(s,s).integral() ] )
        self.assertRaises( AssertionError, dist.add, 'term' )

    def test_simplify(self):
        dist = recursion_distribution( term(dxx,s) )
        dist.add( term(px,s).add( self.rpa ) )
        dist.add( term(s,s).add( self.fe ) )
        dist.add( term(px,s).add( self.rpa, 2 ) )
        dist.add( term(s,s).add( self.rpa ).add( self.fe ) )
        dist.add( term(s,s).add( self.fe ).add( self.rpa ) )
        dist.simplify()
        self.assertEqual( dist.terms(), 3 )
        # Order of first appearance is kept
        self.assertEqual( dist[0], term(px,s).add( self.rpa, 3 ) )
        self.assertEqual( dist[1], term(s,s).add( self.fe ) )
        self.assertEqual( dist[2].prefactor(), 2 )
        self.assertEqual( dist[2].signature(), term(s,s).add( self.fe ).add( self.rpa ).signature() )

    def test_simplify_idempotent(self):
        dist = recursion_distribution( term(dxx,s) )
        for i in range(3):
            dist.add( term(px,s).add( self.rpa ) )
            dist.add( term(s,s).add( self.fe, -1 ) )
        dist.simplify()
        once = dist.expansion()
        dist.simplify()
        self.assertEqual( dist.expansion(), once )

    def test_cancellation(self):
        dist = recursion_distribution( term(dxx,s) )
        dist.add( term(s,s).add( self.fe, 3 ) )
        dist.add( term(px,s).add( self.rpa ) )
        dist.add( term(s,s).add( self.fe, -2 ) )
        dist.add( term(s,s).add( self.fe, -1 ) )
        dist.simplify()
        self.assertEqual( dist.expansion(), [ term(px,s).add( self.rpa ) ] )
        dist.add( term(px,s).add( self.rpa, -1 ) )
        dist.simplify()
        self.assertTrue( dist.empty() )

    def test_rational_cancellation(self):
        dist = recursion_distribution( term(dxx,s) )
        dist.add( term(s,s).add( self.fe, rational(1,2) ) )
        dist.add( term(s,s).add( self.fe, rational(-1,2) ) )
        dist.simplify()
        self.assertEqual( dist.terms(), 0 )
        dist.add( term(s,s).add( self.fe, rational(1,3) ) )
        dist.add( term(s,s).add( self.fe, rational(1,6) ) )
        dist.simplify()
        self.assertEqual( dist[0].prefactor(), rational(1,2) )

    def test_merge_terms(self):
        terms = [ term(px,s).add( self.rpa ), term(s,s).add( self.fe ), term(px,s).add( self.rpa, -1 ),\
                  term(s,s).add( self.fe, 2 ) ]
        merged = merge_terms( terms )
        # Cancelled terms are kept with a zero prefactor
        self.assertEqual( len( merged ), 2 )
        self.assertTrue( merged[0].is_zero() )
        self.assertEqual( merged[1], term(s,s).add( self.fe, 3 ) )
        self.assertEqual( merge_terms( [] ), [] )
