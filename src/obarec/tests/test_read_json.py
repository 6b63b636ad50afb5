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
from obarec.read_json import *
from unittest.mock import mock_open # allows mocking of open() built-in function

class TestRead_json(unittest.TestCase):
    """Tests for read_json.py and its functions."""
    def setUp(self):
        pass

    def tearDown(self):
        pass

    def test_read_json(self):
        json_text = """[ { "integrand" : "1", "angular_momenta" : [ 1, 0 ] },
                         { "integrand" : "r", "angular_momenta" : [ 2, 1 ], "operator_order" : 1 } ]"""
        data = read_json('filename',opener = mock_open(read_data=json_text) )
        self.assertTrue( isinstance( data, list ) )
        self.assertEqual( len( data ), 2 )
        self.assertEqual( data[0]["integrand"], "1" )
        self.assertEqual( data[0]["angular_momenta"], [ 1, 0 ] )
        self.assertEqual( data[1]["operator_order"], 1 )
        # FileNotFound
        self.assertRaises( FileNotFoundError, read_json, '', opener=open )
        # Improperly formed JSON (ValueError)
        json_text = """error"""
        self.assertRaises( ValueError, read_json,'filename',opener = mock_open(read_data=json_text) )

    def test_file_closed(self):
        m = mock_open(read_data='{ "a" : 1 }')
        read_json('filename',opener = m)
        m.assert_called_once_with('filename','r')
        m().close.assert_called_once_with()
        m = mock_open(read_data='{')
        self.assertRaises( ValueError, read_json,'filename',opener = m )
        m().close.assert_called_once_with()
