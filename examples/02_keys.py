"""
Application keys - Create a scoped key and delete it again
"""
import asyncio
import os

from b2py import StorageClient, Capability, CreateKeyRequest


async def main():
    async with StorageClient(
        os.environ["B2_APPLICATION_KEY_ID"],
        os.environ["B2_APPLICATION_KEY"],
    ) as b2:
        await b2.authorize()

        # Read-only key limited to one folder, valid for a day
        request = CreateKeyRequest(
            key_name="reports-reader",
            capabilities=[Capability.LIST_FILES, Capability.READ_FILES],
            bucket_id=os.environ.get("B2_BUCKET_ID"),
            name_prefix="reports/",
            valid_duration_in_seconds=24 * 3600,
        )
        key = await b2.create_key(request)
        print(f"Created key: {key.key_id}")
        print(f"Secret (shown once): {key.application_key}")

        await b2.delete_key(key.key_id)
        print("Deleted")


if __name__ == "__main__":
    asyncio.run(main())
