from restful_crud.client.rest_client import OBJECTS_ENDPOINT, ApiResponse, ObjectsApiClient

__all__ = ["OBJECTS_ENDPOINT", "ApiResponse", "ObjectsApiClient"]
