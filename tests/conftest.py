"""Shared fixtures: real boto3 clients with stubbed responses."""

import boto3
import pytest
from botocore.stub import Stubber


def _boto_client(service_name: str):
    return boto3.client(
        service_name,
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def boto_sqs():
    return _boto_client("sqs")


@pytest.fixture
def boto_sns():
    return _boto_client("sns")


@pytest.fixture
def sqs_stubber(boto_sqs):
    with Stubber(boto_sqs) as stubber:
        yield stubber


@pytest.fixture
def sns_stubber(boto_sns):
    with Stubber(boto_sns) as stubber:
        yield stubber
