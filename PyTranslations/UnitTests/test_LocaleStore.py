import json
import os
import stat
import tempfile
import unittest

from PyTranslations.Helpers.Tests import WriteLocaleFiles, log_input_expected_error, log_input_expected_result, log_test_name
from PyTranslations.LocaleStore import LocaleStore
from PyTranslations.TranslationsError import DecodeError, NotFoundError, WriteError

class TestLocaleStore(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.locales_dir = os.path.join(self.temp_dir.name, "__locales")
        WriteLocaleFiles(self.locales_dir, {
            "en": { "home": "Home", "settings": "Settings" },
            "de": { "home": "Startseite" },
        })
        self.store = LocaleStore(self.locales_dir)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_GetLocalePath(self):
        self.assertEqual(self.store.GetLocalePath("fr"), os.path.join(self.locales_dir, "fr.json"))

    def test_ReadLocale(self):
        log_test_name("ReadLocale")
        result = self.store.ReadLocale("de")
        expected = { "home": "Startseite" }
        log_input_expected_result("de", expected, result)
        self.assertEqual(result, expected)

    def test_ReadMissingLocale(self):
        with self.assertRaises(NotFoundError) as context:
            self.store.ReadLocale("xx")
        self.assertEqual(context.exception.path, self.store.GetLocalePath("xx"))

    decode_cases = [
        (b"not json", "malformed"),
        (b'["home"]', "array"),
        (b'{"home": 1}', "number value"),
        (b'{"home": {"nested": "value"}}', "nested object"),
        (b'\xff\xfe{', "invalid encoding"),
    ]

    def test_ReadInvalidLocale(self):
        log_test_name("ReadInvalidLocale")
        for content, description in self.decode_cases:
            with self.subTest(description=description):
                with open(self.store.GetLocalePath("bad"), 'wb') as f:
                    f.write(content)

                with self.assertRaises(DecodeError) as context:
                    self.store.ReadLocale("bad")
                log_input_expected_error(content, DecodeError, context.exception)

    def test_WriteLocaleReplacesFile(self):
        log_test_name("WriteLocaleReplacesFile")
        payload = json.dumps({ "settings": "Einstellungen" }).encode('utf-8')
        path = self.store.WriteLocale("de", payload)

        self.assertEqual(path, self.store.GetLocalePath("de"))
        result = self.store.ReadLocale("de")
        log_input_expected_result(payload, { "settings": "Einstellungen" }, result)
        self.assertEqual(result, { "settings": "Einstellungen" })

    def test_WriteLocaleCreatesFile(self):
        old_umask = os.umask(0)
        try:
            path = self.store.WriteLocale("fr", b'{"home": "Accueil"}')
        finally:
            os.umask(old_umask)

        self.assertEqual(stat.S_IMODE(os.stat(path).st_mode), 0o664)
        with open(path, 'rb') as f:
            self.assertEqual(f.read(), b'{"home": "Accueil"}')

    def test_WriteLocaleMissingDirectory(self):
        store = LocaleStore(os.path.join(self.temp_dir.name, "missing"))
        with self.assertRaises(WriteError):
            store.WriteLocale("fr", b"{}")

if __name__ == '__main__':
    unittest.main()
