import doctest
import unittest
from wordkit import inflection, regex, word
from wordkit.functions import functions as string_functions

class TestDocstringExamples(unittest.TestCase):
    def test_examples(self):
        for module in (string_functions, inflection, regex, word):
            with self.subTest(module=module.__name__):
                result = doctest.testmod(module)
                self.assertEqual(result.failed, 0)
