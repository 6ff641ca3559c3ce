"""
Basic usage - Authorize and create a bucket
"""
import asyncio
import os

from b2py import StorageClient, DuplicateBucketNameError


async def main():
    key_id = os.environ["B2_APPLICATION_KEY_ID"]
    application_key = os.environ["B2_APPLICATION_KEY"]

    async with StorageClient(key_id, application_key) as b2:
        await b2.authorize()
        print(f"Authorized! Account: {b2.session.account_id}")

        try:
            bucket_id = await b2.create_bucket("my-example-bucket-1234")
        except DuplicateBucketNameError:
            print("That bucket name is taken (names are global across all accounts)")
            return

        ticket = await b2.get_upload_url(bucket_id)
        print(f"Upload to: {ticket.upload_url}")

        files = await b2.list_file_names(bucket_id)
        print(f"\nFiles in bucket: {len(files)}")
        for f in files:
            print(f"  {f['fileName']}")


if __name__ == "__main__":
    asyncio.run(main())
