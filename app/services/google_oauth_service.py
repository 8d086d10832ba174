# app/services/google_oauth_service.py

import logging
import requests
from typing import Optional, Dict
from urllib.parse import urlencode
from app.core.config import get_settings
from app.core.exceptions import AuthenticationError
from app.schemas.user import UserUpsert

logger = logging.getLogger(__name__)

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v3/userinfo"
GOOGLE_TOKENINFO_URL = "https://oauth2.googleapis.com/tokeninfo"
REQUEST_TIMEOUT = 10


class GoogleOAuthService:
    def __init__(self):
        self.settings = get_settings()

    def get_login_url(self) -> str:
        """Google consent screen URL"""
        params = {
            "response_type": "code",
            "client_id": self.settings.google_client_id,
            "redirect_uri": self.settings.google_redirect_uri,
            "scope": "openid email profile",
            "prompt": "select_account",
        }
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"

    def get_user_info_from_code(self, code: str) -> Optional[Dict]:
        """Exchange an authorization code for the Google profile, None on failure"""
        token_response = requests.post(
            GOOGLE_TOKEN_URL,
            data={
                "code": code,
                "client_id": self.settings.google_client_id,
                "client_secret": self.settings.google_client_secret,
                "redirect_uri": self.settings.google_redirect_uri,
                "grant_type": "authorization_code",
            },
            timeout=REQUEST_TIMEOUT,
        )
        if token_response.status_code != 200:
            logger.warning("Google code exchange failed: %s", token_response.status_code)
            return None

        access_token = token_response.json().get("access_token")
        if not access_token:
            return None

        user_info = requests.get(
            GOOGLE_USERINFO_URL,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=REQUEST_TIMEOUT,
        )
        if user_info.status_code != 200:
            logger.warning("Google userinfo failed: %s", user_info.status_code)
            return None

        return user_info.json()

    def verify_id_token(self, id_token: str) -> Dict:
        """Validate an id_token with Google and check it was issued for this client"""
        response = requests.get(
            GOOGLE_TOKENINFO_URL, params={"id_token": id_token}, timeout=REQUEST_TIMEOUT
        )
        if response.status_code != 200:
            raise AuthenticationError("Invalid Google token")

        token_info = response.json()
        if token_info.get("aud") != self.settings.google_client_id:
            raise AuthenticationError("Google token was issued for another client")
        if not token_info.get("sub"):
            raise AuthenticationError("Invalid Google token payload")
        return token_info

    @staticmethod
    def to_user_upsert(profile: Dict) -> UserUpsert:
        """Map a Google profile (userinfo or tokeninfo) onto our account fields"""
        return UserUpsert(
            user_id=str(profile.get("sub") or profile.get("id")),
            email=profile.get("email"),
            first_name=profile.get("given_name"),
            last_name=profile.get("family_name"),
            profile_image_url=profile.get("picture"),
        )
