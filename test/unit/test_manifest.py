from io import StringIO
from unittest import mock

from . import *

from shellopts.descriptor import OptionFlag
from shellopts.exceptions import ManifestError
from shellopts.manifest import *


class TestParseManifest(TestCase):
    def test_list(self):
        name, descriptors = parse_manifest([
            {'name': 'errexit', 'letter': 'e'},
            {'letter': 'x', 'default': True},
        ])
        self.assertIsNone(name)
        self.assertKeys(descriptors, ['errexit', 'x'])
        self.assertEqual(descriptors[0].letter, 'e')
        self.assertEqual(descriptors[1].default, 1)
        self.assertIs(type(descriptors[1].default), int)

    def test_mapping(self):
        name, descriptors = parse_manifest({
            'name': 'globbing',
            'options': [{'name': 'dotglob', 'flags': ['bashopts',
                                                      'hide_set_o'],
                         'help': 'Match dotfiles.'}],
        })
        self.assertEqual(name, 'globbing')
        self.assertEqual(descriptors[0].flags,
                         OptionFlag.bashopts | OptionFlag.hide_set_o)
        self.assertEqual(descriptors[0].help, 'Match dotfiles.')

    def test_single_flag(self):
        name, descriptors = parse_manifest([
            {'name': 'login_shell', 'flags': 'read_only'},
        ])
        self.assertEqual(descriptors[0].flags, OptionFlag.read_only)

    def test_empty(self):
        self.assertEqual(parse_manifest({'name': 'empty'}), ('empty', []))
        self.assertEqual(parse_manifest([]), (None, []))

    def test_hooks(self):
        read, write = mock.Mock(), mock.Mock()
        name, descriptors = parse_manifest(
            [{'name': 'vi', 'hooks': 'editing_mode'}],
            {'editing_mode': Hooks(read, write)}
        )
        self.assertIs(descriptors[0].read_hook, read)
        self.assertIs(descriptors[0].write_hook, write)

    def test_partial_hooks(self):
        write = mock.Mock()
        name, descriptors = parse_manifest(
            [{'name': 'vi', 'hooks': 'editing_mode'}],
            {'editing_mode': Hooks(write=write)}
        )
        self.assertIsNone(descriptors[0].read_hook)
        self.assertIs(descriptors[0].write_hook, write)

    def test_unknown_hooks(self):
        with self.assertRaisesRegex(ManifestError, "unknown hooks 'foo'"):
            parse_manifest([{'name': 'vi', 'hooks': 'foo'}])

    def test_unknown_field(self):
        with self.assertRaisesRegex(ManifestError, "unknown field\\(s\\) " +
                                    "'value'"):
            parse_manifest([{'name': 'vi', 'value': 1}])

    def test_invalid_option(self):
        self.assertRaises(ManifestError, parse_manifest, [{'name': 'a b'}])
        self.assertRaises(ManifestError, parse_manifest, [{'name': 1}])
        self.assertRaises(ManifestError, parse_manifest,
                          [{'name': 'a', 'flags': ['unknown']}])
        self.assertRaises(ManifestError, parse_manifest, ['errexit'])

    def test_invalid_manifest(self):
        self.assertRaises(ManifestError, parse_manifest, 'errexit')
        self.assertRaises(ManifestError, parse_manifest, {'options': 'a'})


class TestLoadManifest(TestCase):
    def test_stream(self):
        stream = StringIO(
            'name: history\n' +
            'options:\n' +
            '  - name: histappend\n' +
            '    flags: [bashopts, hide_set_o]\n' +
            "  - letter: 'H'\n"
        )
        name, descriptors = load_manifest(stream)
        self.assertEqual(name, 'history')
        self.assertKeys(descriptors, ['histappend', 'H'])

    def test_path(self):
        data = "- name: errexit\n  letter: 'e'\n"
        with mock.patch('builtins.open', mock.mock_open(read_data=data)) as m:
            name, descriptors = load_manifest('options.yml')
        m.assert_called_once_with('options.yml')
        self.assertKeys(descriptors, ['errexit'])

    def test_bad_yaml(self):
        self.assertRaises(ManifestError, load_manifest,
                          StringIO('options: [\n'))
