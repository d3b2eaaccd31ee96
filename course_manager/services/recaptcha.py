"""
reCAPTCHA Service

Forwards the client's reCAPTCHA v3 token to Google's siteverify endpoint.
"""

import logging
import requests
from flask import current_app

logger = logging.getLogger(__name__)


def recaptcha_enabled():
    return bool(current_app.config.get('RECAPTCHA_SECRET_KEY'))


def verify_recaptcha(token, remote_ip=None, action=None):
    """Return True when the token passes verification.

    Verification is skipped (always True) when no secret key is configured.
    Network errors and malformed responses count as a failed check.
    """
    if not recaptcha_enabled():
        return True
    if not token:
        logger.info('Missing reCAPTCHA token')
        return False

    config = current_app.config
    payload = {
        'secret': config['RECAPTCHA_SECRET_KEY'],
        'response': token,
    }
    if remote_ip:
        payload['remoteip'] = remote_ip

    try:
        resp = requests.post(config['RECAPTCHA_VERIFY_URL'], data=payload,
                             timeout=config.get('RECAPTCHA_TIMEOUT', 6))
        if resp.status_code != 200:
            logger.warning('reCAPTCHA verify error %s', resp.status_code)
            return False
        result = resp.json()
    except requests.exceptions.Timeout:
        logger.warning('reCAPTCHA verify timed out')
        return False
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.warning('reCAPTCHA verify failed: %s', e)
        return False

    if not result.get('success'):
        logger.info('reCAPTCHA rejected token: %s', result.get('error-codes'))
        return False
    if action and result.get('action') not in (None, action):
        logger.info('reCAPTCHA action mismatch: %s', result.get('action'))
        return False

    score = result.get('score')
    if score is not None and score < config.get('RECAPTCHA_MIN_SCORE', 0.5):
        logger.info('reCAPTCHA score %.2f below threshold', score)
        return False
    return True
