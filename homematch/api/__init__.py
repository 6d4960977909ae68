from homematch.api.auth import AuthApi
from homematch.api.users import UserApi
from homematch.api.properties import PropertyApi, build_query_string
from homematch.api.ai import AiApi

__all__ = [
    "AuthApi",
    "UserApi",
    "PropertyApi",
    "AiApi",
    "build_query_string"
]
