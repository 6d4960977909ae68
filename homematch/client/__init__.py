from homematch.client.gateway import ApiGateway, ApiResult
from homematch.client.navigation import Navigator

__all__ = ["ApiGateway", "ApiResult", "Navigator"]
