"""Navigator Secrets Meta information.
   Navigator Secrets seals one-time, self-expiring secrets for later retrieval.
"""
__title__ = 'navigator_secrets'
__description__ = (
   'Navigator Secrets seals one-time, self-expiring secrets '
   'for later retrieval.'
)
__version__ = '0.1.0'
__copyright__ = 'Copyright (c) 2026 Jesus Lara'
__author__ = 'Jesus Lara'
__author_email__ = 'jesuslarag@gmail.com'
__license__ = 'Apache-2.0'
__url__ = 'https://github.com/phenobarbital/navigator-secrets'
