import os
import unittest
from dataclasses import is_dataclass
from pathlib import Path
from tempfile import TemporaryDirectory

from envkit.env import del_env, get_env, has_env, init_env, set_env
from envkit.store import MemoryEnvStore, OsEnvironStore

_NAMES = ("ENVKIT_TEST_A", "ENVKIT_TEST_B")


class OsEnvironStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self._old = {name: os.getenv(name) for name in _NAMES}
        for name in _NAMES:
            os.environ.pop(name, None)
        self.store = OsEnvironStore()

    def tearDown(self) -> None:
        for key, value in self._old.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value

    def test_writes_through_to_os_environ(self) -> None:
        self.store.set("ENVKIT_TEST_A", "1")
        self.assertEqual(os.environ["ENVKIT_TEST_A"], "1")
        self.assertTrue(self.store.has("ENVKIT_TEST_A"))
        self.store.delete("ENVKIT_TEST_A")
        self.assertNotIn("ENVKIT_TEST_A", os.environ)

    def test_sees_external_mutation(self) -> None:
        self.assertIsNone(self.store.get("ENVKIT_TEST_B"))
        os.environ["ENVKIT_TEST_B"] = "outside"
        self.assertEqual(self.store.get("ENVKIT_TEST_B"), "outside")

    def test_delete_absent_is_noop(self) -> None:
        self.store.delete("ENVKIT_TEST_A")
        self.assertFalse(self.store.has("ENVKIT_TEST_A"))

    def test_is_plain_class(self) -> None:
        self.assertFalse(is_dataclass(OsEnvironStore))

    def test_init_env_skips_nul_lines(self) -> None:
        with TemporaryDirectory() as tmp:
            path = Path(tmp) / ".env"
            path.write_text("ENVKIT_TEST_A=bad\0value\nENVKIT_TEST_B=ok\n", encoding="utf-8")
            init_env(path, store=self.store)
        self.assertNotIn("ENVKIT_TEST_A", os.environ)
        self.assertEqual(os.environ["ENVKIT_TEST_B"], "ok")

    def test_default_accessors_use_process_environment(self) -> None:
        set_env("ENVKIT_TEST_A", "from accessor")
        self.assertEqual(os.environ["ENVKIT_TEST_A"], "from accessor")
        self.assertEqual(get_env("ENVKIT_TEST_A", "ENVKIT_TEST_B"), ["from accessor", None])
        del_env(*_NAMES)
        self.assertEqual(has_env(*_NAMES), [False, False])


class MemoryEnvStoreTests(unittest.TestCase):
    def test_independent_instances(self) -> None:
        first = MemoryEnvStore()
        second = MemoryEnvStore()
        first.set("A", "1")
        self.assertFalse(second.has("A"))

    def test_initial_values(self) -> None:
        store = MemoryEnvStore(values={"A": "1"})
        self.assertEqual(store.get("A"), "1")
        store.delete("A")
        store.delete("A")
        self.assertIsNone(store.get("A"))


if __name__ == "__main__":
    unittest.main()
