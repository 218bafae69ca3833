#!/usr/bin/env python3
"""Example of a relying party running a verify flow end to end."""

import time

from jose import jwt

import ssi_client

CLIENT_ID = "example-relying-party"
CLIENT_SECRET = "example-shared-secret"


def provider_response(request_id: str) -> str:
    """Sign the response the provider would send back after the holder answers."""
    return jwt.encode(
        {
            "type": "age-check",
            "data": {"over18": True},
            "status": "succes",
            "connector": "irma",
            "requestId": request_id,
            "iss": "ssi-service-provider",
            "aud": CLIENT_ID,
            "sub": "credential-verify-response",
            "iat": int(time.time()),
        },
        CLIENT_SECRET,
        algorithm="HS256",
    )


def main():
    """Demonstrate the verify flow."""
    print("SSI Client Verify Flow Example")
    print("=" * 40)

    client = ssi_client.SSIClient(CLIENT_ID, CLIENT_SECRET, expires_in=600)

    # 1. Build the URL the holder opens
    print("\n1. Building verify request URL...")
    url = client.verify_url("age-check", "req-1")
    print(f"   {url[:80]}...")

    # 2. The provider answers with a signed token
    print("\n2. Receiving provider response...")
    token = provider_response("req-1")

    # 3. Validate it and read the disclosed attributes
    print("\n3. Parsing response...")
    response = client.parse_verify_response(token)
    print(f"   Request: {response.request_id}")
    print(f"   Status:  {response.status.name.lower()}")
    print(f"   Data:    {response.data}")


if __name__ == "__main__":
    main()
