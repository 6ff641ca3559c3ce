"""
Upload a file with an upload ticket

The client only hands out the ticket; the upload is a plain POST to the
ticket URL with the ticket token.
"""
import asyncio
import hashlib
import os
import sys
from pathlib import Path
from urllib.parse import quote

import aiohttp

from b2py import StorageClient


async def main(path: Path, bucket_id: str):
    async with StorageClient(
        os.environ["B2_APPLICATION_KEY_ID"],
        os.environ["B2_APPLICATION_KEY"],
    ) as b2:
        await b2.authorize()
        ticket = await b2.get_upload_url(bucket_id)

    data = path.read_bytes()
    headers = {
        "Authorization": ticket.authorization_token,
        "X-Bz-File-Name": quote(path.name),
        "Content-Type": "b2/x-auto",
        "X-Bz-Content-Sha1": hashlib.sha1(data).hexdigest(),
    }

    async with aiohttp.ClientSession() as session:
        async with session.post(ticket.upload_url, data=data, headers=headers) as response:
            response.raise_for_status()
            result = await response.json()

    print(f"Uploaded {result['fileName']} ({result['fileId']})")


if __name__ == "__main__":
    asyncio.run(main(Path(sys.argv[1]), sys.argv[2]))
