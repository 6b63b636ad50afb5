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
from obarec.integral import integral_component, integral_class
from obarec.factor import factor
from obarec.rational import rational
from obarec.term import recursion_term
from obarec.distribution import recursion_distribution
from obarec.drivers import local_ecp_driver, projected_ecp_driver, reduced_projected_ecp_driver

s = tensor_component()
px = tensor_component(1,0,0)
dxx = tensor_component(2,0,0)

def term(a,b,name,l=0):
    return recursion_term( integral_component( [ a, b ], operator_component(name,None,l) ) )

def has_factor(t,f):
    return f in t.factors()

class TestECPDrivers(unittest.TestCase):
    """Tests for the local and projected ECP recursions."""
    def setUp(self):
        self.q = factor('q','q')
        self.ra = factor('RA','ra',px)
        self.rb = factor('RB','rb',px)

    def tearDown(self):
        pass

    def test_local_ecp(self):
        d = local_ecp_driver()
        dist = d.bra_vrr( term(dxx,s,'U_L'), 'x' )
        self.assertEqual( dist.terms(), 2 )
        self.assertEqual( dist[0], term(px,s,'U_L').add( self.ra ) )
        self.assertEqual( dist[1], term(s,s,'U_L').add( factor('1/xi','fxi') ) )
        dist = d.ket_vrr( term(s,px,'U_L'), 'x' )
        self.assertEqual( dist.terms(), 1 )
        self.assertEqual( dist[0], term(s,s,'U_L').add( self.rb ) )

    def test_projected_ecp(self):
        d = projected_ecp_driver()
        dist = d.bra_vrr( term(px,s,'U_l',3), 'x' )
        self.assertEqual( dist.terms(), 5 )
        qterms = [ t for t in dist if has_factor(t,self.q) ]
        self.assertEqual( len( qterms ), 3 )
        rbterms = [ t for t in qterms if has_factor(t,self.rb) ]
        self.assertEqual( len( rbterms ), 2 )
        self.assertEqual( [ t.order() for t in rbterms ], [ 2, 0 ] )
        raterms = [ t for t in qterms if has_factor(t,self.ra) ]
        self.assertEqual( len( raterms ), 1 )
        self.assertEqual( raterms[0].prefactor(), -7 )
        self.assertEqual( raterms[0].order(), 1 )
        # No projector sums for l = 0
        self.assertEqual( d.bra_vrr( term(px,s,'U_l',0), 'x' ).terms(), 2 )
        self.assertEqual( d.ket_vrr( term(s,px,'U_l',0), 'x' ).terms(), 2 )
        # b_i/(2b) weights the integral of the RB_i term, not ( a | b-1_i )
        dist = d.bra_vrr( term(px,px,'U_l',1), 'x' )
        self.assertEqual( dist.terms(), 4 )
        fbi = [ t for t in dist if has_factor(t,factor('1/b','fbi')) ]
        self.assertEqual( len( fbi ), 1 )
        self.assertEqual( fbi[0].integral(), term(s,px,'U_l',0).integral() )
        self.assertEqual( fbi[0].prefactor(), rational(3,2) )
        dist = d.bra_vrr( term(dxx,s,'U_l',2), 'x' )
        self.assertEqual( dist.terms(), 7 )
        fai = [ t for t in dist if has_factor(t,factor('1/a','fai')) ]
        self.assertEqual( len( fai ), 1 )
        self.assertEqual( fai[0].integral(), term(px,s,'U_l',0).integral() )
        self.assertEqual( fai[0].prefactor(), rational(-5,2) )

    def test_projected_ecp_ket(self):
        d = projected_ecp_driver()
        dist = d.ket_vrr( term(px,dxx,'U_l',3), 'x' )
        self.assertEqual( dist.terms(), 8 )
        qterms = [ t for t in dist if has_factor(t,self.q) ]
        self.assertEqual( len( qterms ), 4 )
        # One RA_i term per k of the (l-1)/2 sum
        raterms = [ t for t in qterms if has_factor(t,self.ra) ]
        self.assertEqual( [ t.order() for t in raterms ], [ 2, 0 ] )
        self.assertEqual( [ t.prefactor() for t in raterms ], [ 7, 7 ] )
        self.assertEqual( [ t for t in dist if has_factor(t,factor('1/a','fai')) ], [] )
        # The (l-2)/2 sum adds -b_i/(2b) to ( a | U_1 | b ) when a_i > 0
        fbi = [ t for t in dist if has_factor(t,factor('1/b','fbi')) ]
        self.assertEqual( len( fbi ), 1 )
        self.assertEqual( fbi[0].integral(), term(px,px,'U_l',1).integral() )
        self.assertEqual( fbi[0].prefactor(), rational(-7,2) )
        self.assertEqual( sorted( f.label() for f in fbi[0].factors() ), [ 'f2abz', 'fazi', 'fbi', 'p', 'q' ] )
        # No such term with an s function on the bra
        dist = d.ket_vrr( term(s,dxx,'U_l',3), 'x' )
        self.assertEqual( dist.terms(), 7 )
        self.assertEqual( [ t for t in dist if has_factor(t,factor('1/b','fbi')) ], [] )
        dist = d.ket_vrr( term(px,px,'U_l',3), 'x' )
        self.assertEqual( dist.terms(), 6 )
        self.assertEqual( [ t for t in dist if has_factor(t,factor('1/a','fai')) ], [] )

    def test_projected_ecp_recursion(self):
        group = projected_ecp_driver().create_recursion( integral_class( [ 1, 1 ], 'U_l', order = 2 ).components() )
        self.assertEqual( group.expansions(), 9 )
        for dist in group:
            for t in dist:
                self.assertEqual( t[0].order(), 0 )
                self.assertEqual( t[1].order(), 0 )
                self.assertTrue( t.order() <= 2 )

    def test_reduced_projected_ecp(self):
        d = reduced_projected_ecp_driver()
        dist = d.red_bra_vrr( term(px,s,'U_l',1), 'x' )
        self.assertEqual( dist.terms(), 1 )
        self.assertEqual( sorted( f.label() for f in dist[0].factors() ), [ 'fai', 'fp', 'q', 'ra_x' ] )
        dist = d.red_bra_vrr( term(dxx,s,'U_l',1), 'x' )
        self.assertEqual( dist.terms(), 2 )
        self.assertEqual( dist[1].prefactor(), rational(1,2) )
        dist = d.red_ket_vrr( term(s,px,'U_l',1), 'x' )
        self.assertEqual( sorted( f.label() for f in dist[0].factors() ), [ 'fbi', 'fm', 'q', 'rb_x' ] )
        components = integral_class( [ 2, 1 ], 'U_l', order = 1 ).components()
        group = projected_ecp_driver().create_reduced_recursion( components )
        self.assertEqual( group.expansions(), 18 )
        self.assertEqual( group, d.create_recursion( components ) )
        for dist in group:
            for t in dist:
                self.assertEqual( t.order(), 1 )

