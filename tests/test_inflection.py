import os
import tempfile
import unittest
from wordkit import inflection

class TestSingularize(unittest.TestCase):
    def test_es_suffixes(self):
        for plural, singular in [('buses', 'bus'), ('dishes', 'dish'), ('churches', 'church'),
                                 ('boxes', 'box'), ('quizzes', 'quizz')]:
            self.assertEqual(inflection.singularize(plural), singular)

    def test_f_suffixes(self):
        self.assertEqual(inflection.singularize('leafs'), 'leaf')
        self.assertEqual(inflection.singularize('safes'), 'safe')

    def test_ies(self):
        self.assertEqual(inflection.singularize('cities'), 'city')

    def test_consonant_ys(self):
        self.assertEqual(inflection.singularize('flys'), 'fly')

    def test_plain_s(self):
        self.assertEqual(inflection.singularize('cats'), 'cat')

    def test_case_insensitive(self):
        self.assertEqual(inflection.singularize('BOXES'), 'BOX')

    def test_no_rule(self):
        self.assertEqual(inflection.singularize('child'), 'child')
        self.assertEqual(inflection.singularize(''), '')

class TestPluralize(unittest.TestCase):
    def test_es(self):
        self.assertEqual(inflection.pluralize('box'), 'boxes')
        self.assertEqual(inflection.pluralize('church'), 'churches')

    def test_f(self):
        self.assertEqual(inflection.pluralize('leaf'), 'leafs')
        self.assertEqual(inflection.pluralize('knife'), 'knifes')

    def test_y(self):
        self.assertEqual(inflection.pluralize('city'), 'cities')
        self.assertEqual(inflection.pluralize('key'), 'keys')

    def test_fallback(self):
        self.assertEqual(inflection.pluralize('cat'), 'cats')
        self.assertEqual(inflection.pluralize(''), 's')

    def test_case_insensitive(self):
        self.assertEqual(inflection.pluralize('BOX'), 'BOXes')

class TestRules(unittest.TestCase):
    def test_default_rules_are_cached(self):
        self.assertIs(inflection.default_rules(), inflection.default_rules())

    def test_rule_counts(self):
        self.assertEqual(len(inflection.singular_rules()), 5)
        self.assertEqual(len(inflection.plural_rules()), 4)

class TestLoadRules(unittest.TestCase):
    def _write(self, content):
        handle, path = tempfile.mkstemp(suffix='.yaml')
        with os.fdopen(handle, 'w') as f:
            f.write(content)
        self.addCleanup(os.remove, path)
        return path

    def test_custom_rules(self):
        path = self._write(
            "plural:\n"
            "  - pattern: '/^person$/i'\n"
            "    replacement: 'people'\n"
            "plural_fallback: 'z'\n"
        )
        rules = inflection.load_rules(path)
        self.assertEqual(inflection.pluralize('person', rules), 'people')
        self.assertEqual(inflection.pluralize('cat', rules), 'catz')
        self.assertEqual(inflection.singularize('cats', rules), 'cats')

    def test_missing_replacement(self):
        path = self._write("singular:\n  - pattern: '/s$/'\n")
        with self.assertRaises(ValueError):
            inflection.load_rules(path)

    def test_invalid_pattern(self):
        path = self._write("singular:\n  - pattern: 's$'\n    replacement: ''\n")
        with self.assertRaises(ValueError):
            inflection.load_rules(path)

    def test_not_a_mapping(self):
        path = self._write("- just\n- a list\n")
        with self.assertRaises(ValueError):
            inflection.load_rules(path)
