"""Zhixue (智学网) student homework source."""

from .client import ZhixueClient
from .producer import ZhixueFeedProducer
from .response_parser import parse_homework_response

__all__ = ["ZhixueClient", "ZhixueFeedProducer", "parse_homework_response"]
