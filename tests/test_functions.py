import unittest
from wordkit import functions

class TestPascalCase(unittest.TestCase):
    def test_pascal_case(self):
        self.assertEqual(functions.pascal_case('hello_big  world'), 'HelloBigWorld')

    def test_keeps_inner_case(self):
        self.assertEqual(functions.pascal_case('xml httpRequest'), 'XmlHttpRequest')

class TestCamelCase(unittest.TestCase):
    def test_camel_matches_pascal(self):
        for text in ['hello world', 'Hello_World', 'a b c']:
            pascal = functions.pascal_case(text)
            self.assertEqual(functions.camel_case(text), pascal[:1].lower() + pascal[1:])

    def test_empty(self):
        self.assertEqual(functions.camel_case(''), '')

class TestKebabCase(unittest.TestCase):
    def test_punctuation(self):
        self.assertEqual(functions.kebab_case('hello, world!'), 'hello-world')

    def test_uppercase_letters_are_separators(self):
        self.assertEqual(functions.kebab_case('HelloWorld'), 'ello-orld')
        self.assertEqual(functions.snake_case('Hello World'), 'ello_orld')

    def test_only_separators(self):
        self.assertEqual(functions.kebab_case('  --  '), '')

    def test_mixed_separators_collapse(self):
        self.assertEqual(functions.snake_case(' a -- b\t\tc '), 'a_b_c')

class TestTitleCase(unittest.TestCase):
    def test_title_case(self):
        self.assertEqual(functions.title_case('the QUICK\tbrown fox'), 'The Quick\tBrown Fox')

class TestSubstring(unittest.TestCase):
    def test_negative_start_past_beginning(self):
        self.assertEqual(functions.substring('abc', -10), 'abc')

    def test_start_at_end(self):
        self.assertEqual(functions.substring('abc', 3), '')

    def test_negative_length_past_start(self):
        self.assertEqual(functions.substring('abc', 2, -2), '')

    def test_length_past_end(self):
        self.assertEqual(functions.substring('abc', 1, 10), 'bc')

class TestReplaceAll(unittest.TestCase):
    def test_skips_empty_search(self):
        self.assertEqual(functions.replace_all({'': 'x', 'b': 'c'}, 'abc'), 'acc')

class TestRemoveLetters(unittest.TestCase):
    def test_substrings_not_characters(self):
        self.assertEqual(functions.remove_letters('abcba', 'ab'), 'cba')

    def test_empty_target(self):
        self.assertEqual(functions.remove_letters('abc', ''), 'abc')

class TestContains(unittest.TestCase):
    def test_empty_needle(self):
        self.assertTrue(functions.contains('abc', ''))

    def test_tuple(self):
        self.assertTrue(functions.contains('ABC', ('x', 'bc')))

class TestChainOperations(unittest.TestCase):
    def test_no_functions(self):
        self.assertEqual(functions.chain_operations('a', []), 'a')
