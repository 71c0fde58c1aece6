from unittest import TestCase

from json_schema_to_fsharp import GeneratorConfig, RecordLayout


class TestGeneratorConfig(TestCase):
    def test_defaults(self):
        config = GeneratorConfig()
        self.assertEqual(config.ref_prefixes, ["#/definitions/", "#/$defs/"])
        self.assertEqual(config.record_layout, RecordLayout.INLINE)
        self.assertEqual(config.indent, "    ")
        self.assertEqual(config.type_overrides, {})
        self.assertTrue(config.group_recursive_types)
        self.assertEqual(config.module_name, "")
        self.assertEqual(config.opens, [])

    def test_from_dict(self):
        config = GeneratorConfig.from_dict(
            {
                "record_layout": "multiline",
                "indent": "  ",
                "type_overrides": {"int": "int64"},
                "module_name": "Types",
                "unknown_option": True,
            }
        )
        self.assertEqual(config.record_layout, RecordLayout.MULTILINE)
        self.assertEqual(config.indent, "  ")
        self.assertEqual(config.type_overrides, {"int": "int64"})
        self.assertEqual(config.module_name, "Types")
        self.assertFalse(hasattr(config, "unknown_option"))

    def test_invalid_layout(self):
        with self.assertRaises(ValueError):
            GeneratorConfig.from_dict({"record_layout": "sideways"})

    def test_round_trip(self):
        config = GeneratorConfig(record_layout=RecordLayout.MULTILINE, opens=["System"], group_recursive_types=False)
        data = config.to_dict()
        self.assertEqual(data["record_layout"], "multiline")
        self.assertEqual(GeneratorConfig.from_dict(data), config)

    def test_instances_do_not_share_lists(self):
        first = GeneratorConfig()
        first.opens.append("System")
        self.assertEqual(GeneratorConfig().opens, [])
