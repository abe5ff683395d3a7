from unittest import TestCase

from ..bencode import bdecode
from ..helpers import (as_any_string, as_int, as_long, as_string, bany_string, bdict,
                       bint, bkey, blist, blong, bstring, bvalue, to_python)
from ..values import BBinary, BDictionary, BInteger, BList

class TestIntegers(TestCase):
    def test_as_int(self):
        self.assertEqual(as_int(BInteger(2147483647)), 2147483647)
        self.assertEqual(as_int(BInteger(-2147483648)), -2147483648)
        self.assertIsNone(as_int(BInteger(2147483648)))
        self.assertIsNone(as_int(BInteger(-2147483649)))

    def test_as_long(self):
        self.assertEqual(as_long(BInteger(9223372036854775807)), 9223372036854775807)
        self.assertEqual(as_long(BInteger(-9223372036854775808)), -9223372036854775808)
        self.assertIsNone(as_long(BInteger(9223372036854775808)))
        self.assertIsNone(as_long(BInteger(-9223372036854775809)))

    def test_decoded(self):
        self.assertEqual(as_int(bdecode(b'i2147483647e')), 2147483647)
        self.assertIsNone(as_int(bdecode(b'i2147483648e')))
        self.assertEqual(as_long(bdecode(b'i2147483648e')), 2147483648)

    def test_wrong_kind(self):
        self.assertIsNone(as_int(bstring('1')))
        self.assertIsNone(as_long(blist(1)))

    def test_constructors(self):
        self.assertEqual(bint(2147483647), BInteger(2147483647))
        self.assertEqual(blong(-9223372036854775808), BInteger(-9223372036854775808))
        self.assertRaises(OverflowError, bint, 2147483648)
        self.assertRaises(OverflowError, blong, 9223372036854775808)
        self.assertRaises(TypeError, bint, True)
        self.assertRaises(TypeError, bint, '1')

class TestStrings(TestCase):
    def test_bstring(self):
        self.assertEqual(bstring('€'), BBinary(b'\xe2\x82\xac'))
        self.assertEqual(bany_string('\xa3'), BBinary(b'\xc2\xa3'))

    def test_as_string(self):
        self.assertEqual(as_string(BBinary(b'\xe2\x82\xac')), '€')
        self.assertIsNone(as_string(BBinary(b'\xc0'))) # truncated sequence
        self.assertIsNone(as_string(BBinary(b'\xa3')))
        self.assertIsNone(as_string(BInteger(1)))

    def test_as_any_string(self):
        self.assertEqual(as_any_string(BBinary(b'\xe2\x82\xac')), '€')
        self.assertEqual(as_any_string(BBinary(b'\xa3')), '\xa3')
        self.assertEqual(as_any_string(BBinary(b'caf\xe9')), 'caf\xe9')
        self.assertIsNone(as_any_string(BBinary(b'\x81'))) # not in Windows-1252
        self.assertIsNone(as_any_string(blist()))

class TestBuilders(TestCase):
    def test_bkey(self):
        self.assertEqual(bkey('spam'), BBinary(b'spam'))
        self.assertEqual(bkey(b'spam'), BBinary(b'spam'))
        self.assertEqual(bkey(BBinary(b'spam')), BBinary(b'spam'))
        self.assertRaises(TypeError, bkey, 1)
        self.assertRaises(TypeError, bkey, None)

    def test_bvalue(self):
        self.assertEqual(bvalue(1), BInteger(1))
        self.assertEqual(bvalue(True), BInteger(1))
        self.assertEqual(bvalue(False), BInteger(0))
        self.assertEqual(bvalue('spam'), BBinary(b'spam'))
        self.assertEqual(bvalue(bytearray(b'\x00')), BBinary(b'\x00'))
        self.assertEqual(bvalue((1, 'a')), BList([BInteger(1), BBinary(b'a')]))
        self.assertEqual(bvalue({'a': [1, b'x']}),
                         BDictionary([(BBinary(b'a'), BList([BInteger(1), BBinary(b'x')]))]))

        value = BInteger(5)
        self.assertIs(bvalue(value), value)

    def test_bvalue_unsupported(self):
        self.assertRaises(TypeError, bvalue, 1.5)
        self.assertRaises(TypeError, bvalue, None)
        self.assertRaises(TypeError, bvalue, set([1]))
        self.assertRaises(TypeError, bvalue, {1: 2})

    def test_bdict(self):
        value = bdict(('b', 1), (b'c', blist()), (BBinary(b'd'), 'x'), a=2)
        self.assertEqual(value.keys(), [bstring('a'), bstring('b'), bstring('c'), bstring('d')])
        self.assertEqual(value[bstring('a')], BInteger(2))

    def test_bdict_last_write_wins(self):
        self.assertEqual(bdict(('a', 1), ('a', 2)), bdict(('a', 2)))

    def test_blist(self):
        self.assertEqual(blist(), BList())
        self.assertEqual(blist(1, 'a', blist()), BList([BInteger(1), BBinary(b'a'), BList()]))

class TestToPython(TestCase):
    def test_to_python(self):
        value = bdecode(b'd3:cow3:moo4:spaml1:ai1eee')
        self.assertEqual(to_python(value), {b'cow': b'moo', b'spam': [b'a', 1]})

    def test_not_a_value(self):
        self.assertRaises(TypeError, to_python, 1)
