from enum import Enum


class ProjectType(str, Enum):
    """Shape of the hosted application

    Read by bootstrap code, for instance to decide how unhandled errors
    are rendered.
    """

    RESTFUL_API = "restful_api"
    WEB_APPLICATION = "web_application"
