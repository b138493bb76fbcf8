"""Static values shared by the server package."""

PROJECT_NAME = "minishop"
VERSION = "0.1.0"

API_V1_STR = "/api/v1"
API_V2_STR = "/api/v2"
API_V3_STR = "/api/v3"
API_V4_STR = "/api/v4"
