#!/usr/bin/env python3
import os
import unittest
from unittest.mock import patch

from flask import Flask

from gchat_handler.config import (
    get_app_url,
    get_setting,
    get_timeout,
    get_webhook_urls,
    resolve_mention_ids,
    resolve_targets,
)
from gchat_handler.exceptions import ConfigurationError
from gchat_handler.levels import Severity


def clean_env(**values):
    env = {k: v for k, v in os.environ.items() if not k.startswith(('GOOGLE_CHAT_', 'APP_'))}
    env.update(values)
    return patch.dict(os.environ, env, clear=True)


class TestResolveTargets(unittest.TestCase):
    def test_string_is_split_and_trimmed(self):
        self.assertEqual(resolve_targets('  a@x.com , b@y.com '), ['a@x.com', 'b@y.com'])

    def test_list_is_returned_as_is(self):
        self.assertEqual(resolve_targets([' https://a ', 'https://b']), [' https://a ', 'https://b'])

    def test_malformed_string_keeps_empty_segments(self):
        self.assertEqual(resolve_targets('https://a,,'), ['https://a', '', ''])

    def test_missing_value(self):
        for value in (None, '', []):
            with self.assertRaises(ConfigurationError):
                resolve_targets(value)

    def test_webhook_from_env(self):
        with clean_env(GOOGLE_CHAT_WEBHOOK_URL='https://chat/1, https://chat/2'):
            self.assertEqual(get_webhook_urls(), ['https://chat/1', 'https://chat/2'])

    def test_override_wins_over_env(self):
        with clean_env(GOOGLE_CHAT_WEBHOOK_URL='https://chat/env'):
            self.assertEqual(get_webhook_urls(['https://chat/override']), ['https://chat/override'])

    def test_webhook_not_configured(self):
        with clean_env():
            with self.assertRaisesRegex(ConfigurationError, 'webhook url is not configured'):
                get_webhook_urls()


class TestSettings(unittest.TestCase):
    def test_flask_config_takes_precedence(self):
        app = Flask('settings-test')
        app.config['GOOGLE_CHAT_WEBHOOK_URL'] = ['https://chat/app']
        with clean_env(GOOGLE_CHAT_WEBHOOK_URL='https://chat/env'):
            self.assertEqual(get_setting('GOOGLE_CHAT_WEBHOOK_URL'), 'https://chat/env')
            with app.app_context():
                self.assertEqual(get_webhook_urls(), ['https://chat/app'])

    def test_settings_are_read_on_every_call(self):
        with clean_env(GOOGLE_CHAT_NOTIFY_USERS_ERROR='1'):
            self.assertEqual(resolve_mention_ids(Severity.ERROR), '1')
            os.environ['GOOGLE_CHAT_NOTIFY_USERS_ERROR'] = '2'
            self.assertEqual(resolve_mention_ids(Severity.ERROR), '2')

    def test_list_mention_ids_from_flask_config(self):
        app = Flask('mention-list-test')
        app.config['GOOGLE_CHAT_NOTIFY_USERS_DEFAULT'] = ['1', ' 2 ']
        app.config['GOOGLE_CHAT_NOTIFY_USERS_ERROR'] = ('all',)
        with clean_env(), app.app_context():
            self.assertEqual(resolve_mention_ids(Severity.ERROR), '1,2,all')

    def test_app_url_fallback(self):
        with clean_env():
            self.assertEqual(get_app_url(), 'N/A')
        with clean_env(APP_URL='http://localhost'):
            self.assertEqual(get_app_url(), 'http://localhost')

    def test_timeout(self):
        with clean_env():
            self.assertIsNone(get_timeout())
        with clean_env(GOOGLE_CHAT_TIMEOUT_SECONDS='2.5'):
            self.assertEqual(get_timeout(), 2.5)
        with clean_env(GOOGLE_CHAT_TIMEOUT_SECONDS='soon'):
            with self.assertRaises(ConfigurationError):
                get_timeout()


class TestResolveMentionIds(unittest.TestCase):
    def test_default_and_level(self):
        with clean_env(GOOGLE_CHAT_NOTIFY_USERS_DEFAULT=' 10 ', GOOGLE_CHAT_NOTIFY_USERS_CRITICAL=' 20,30 '):
            self.assertEqual(resolve_mention_ids(Severity.CRITICAL), '10,20,30')

    def test_only_default(self):
        with clean_env(GOOGLE_CHAT_NOTIFY_USERS_DEFAULT='10'):
            self.assertEqual(resolve_mention_ids(Severity.DEBUG), '10')

    def test_only_level(self):
        with clean_env(GOOGLE_CHAT_NOTIFY_USERS_NOTICE='all'):
            self.assertEqual(resolve_mention_ids(Severity.NOTICE), 'all')
            self.assertEqual(resolve_mention_ids(Severity.INFO), '')

    def test_unmapped_level(self):
        with clean_env(GOOGLE_CHAT_NOTIFY_USERS_ERROR='10'):
            self.assertEqual(resolve_mention_ids(None), '')


if __name__ == '__main__':
    unittest.main()
