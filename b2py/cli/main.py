"""B2 CLI - Main commands."""
import asyncio
from typing import List, Optional

import aiohttp
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from b2py import StorageClient, B2Exception, Capability

app = typer.Typer(
    name="b2py",
    help="Backblaze B2 command line client",
    add_completion=False
)
console = Console()

KeyIdOption = typer.Option(
    ..., "--key-id", envvar="B2_APPLICATION_KEY_ID", help="Application key id"
)
ApplicationKeyOption = typer.Option(
    ..., "--application-key", envvar="B2_APPLICATION_KEY",
    help="Application key secret"
)


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


async def _with_client(key_id: str, application_key: str, action):
    """Authorize a client and run ``action(client)`` with it."""
    async with StorageClient(key_id, application_key) as b2:
        try:
            await b2.authorize()
            return await action(b2)
        except B2Exception as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)
        except aiohttp.ClientResponseError as e:
            console.print(f"[red]Request failed: HTTP {e.status} {escape(e.message or '')}[/red]")
            raise typer.Exit(1)
        except aiohttp.ClientError as e:
            console.print(f"[red]Connection failed: {escape(str(e))}[/red]")
            raise typer.Exit(1)


@app.command()
def authorize(
    key_id: str = KeyIdOption,
    application_key: str = ApplicationKeyOption,
):
    """Authorize and show account details."""
    async def show_session(b2: StorageClient):
        session = b2.session
        console.print(f"[bold]Account:[/bold] {session.account_id}")
        console.print(f"[bold]API URL:[/bold] {session.api_url}")
        console.print(f"[bold]Download URL:[/bold] {session.download_url}")
        console.print(f"[bold]Recommended part size:[/bold] {session.recommended_part_size:,}")
        console.print(f"[bold]Minimum part size:[/bold] {session.absolute_minimum_part_size:,}")
        console.print(f"[bold]Capabilities:[/bold] {', '.join(session.allowed.capabilities)}")
        if session.allowed.bucket_name:
            console.print(f"[bold]Bucket:[/bold] {session.allowed.bucket_name}")

    run_async(_with_client(key_id, application_key, show_session))


@app.command("create-key")
def create_key(
    name: str = typer.Argument(..., help="Name of the new key"),
    capabilities: List[Capability] = typer.Option(
        ..., "--capability", "-c", help="Capability to grant (repeatable)"
    ),
    bucket_id: Optional[str] = typer.Option(None, "--bucket-id", help="Restrict to one bucket"),
    name_prefix: Optional[str] = typer.Option(None, "--name-prefix", help="Restrict to a file name prefix"),
    duration: Optional[int] = typer.Option(None, "--duration", help="Validity in seconds"),
    key_id: str = KeyIdOption,
    application_key: str = ApplicationKeyOption,
):
    """Create an application key."""
    async def do_create(b2: StorageClient):
        key = await b2.create_key(
            key_name=name,
            capabilities=capabilities,
            bucket_id=bucket_id,
            name_prefix=name_prefix,
            valid_duration_in_seconds=duration,
        )
        console.print(f"[green]Created key {name}[/green]")
        console.print(f"Key ID: {key.key_id}")
        console.print(f"Application key: {key.application_key}")

    run_async(_with_client(key_id, application_key, do_create))


@app.command("delete-key")
def delete_key(
    target_key_id: str = typer.Argument(..., help="Id of the key to delete"),
    key_id: str = KeyIdOption,
    application_key: str = ApplicationKeyOption,
):
    """Delete an application key."""
    async def do_delete(b2: StorageClient):
        await b2.delete_key(target_key_id)
        console.print(f"[green]Deleted key {target_key_id}[/green]")

    run_async(_with_client(key_id, application_key, do_delete))


@app.command("create-bucket")
def create_bucket(
    bucket_name: str = typer.Argument(..., help="Globally unique bucket name"),
    key_id: str = KeyIdOption,
    application_key: str = ApplicationKeyOption,
):
    """Create a private bucket."""
    async def do_create(b2: StorageClient):
        bucket_id = await b2.create_bucket(bucket_name)
        console.print(f"[green]Created bucket {bucket_name}[/green]")
        console.print(f"Bucket ID: {bucket_id}")

    run_async(_with_client(key_id, application_key, do_create))


@app.command("upload-url")
def upload_url(
    bucket_id: str = typer.Argument(..., help="Bucket id"),
    key_id: str = KeyIdOption,
    application_key: str = ApplicationKeyOption,
):
    """Get an upload URL and token for a bucket."""
    async def do_get(b2: StorageClient):
        ticket = await b2.get_upload_url(bucket_id)
        console.print(f"Upload URL: {ticket.upload_url}")
        console.print(f"Authorization token: {ticket.authorization_token}")

    run_async(_with_client(key_id, application_key, do_get))


@app.command()
def ls(
    bucket_id: str = typer.Argument(..., help="Bucket id"),
    prefix: str = typer.Option("", "--prefix", "-p", help="File name prefix"),
    delimiter: str = typer.Option("/", "--delimiter", "-d", help="Folder delimiter"),
    long: bool = typer.Option(False, "-l", "--long", help="Long format with details"),
    key_id: str = KeyIdOption,
    application_key: str = ApplicationKeyOption,
):
    """List file names in a bucket (first page only)."""
    async def list_files(b2: StorageClient):
        files = await b2.list_file_names(bucket_id, prefix=prefix, delimiter=delimiter)

        if long:
            table = Table()
            table.add_column("Action", style="cyan")
            table.add_column("Size", justify="right")
            table.add_column("Name")
            table.add_column("File ID", style="dim")

            for f in files:
                size = f.get("contentLength")
                size_str = "-" if size is None or f.get("action") == "folder" else f"{size:,}"
                table.add_row(f.get("action", ""), size_str, f.get("fileName", ""), f.get("fileId") or "")

            console.print(table)
        else:
            for f in files:
                name = f.get("fileName", "")
                if f.get("action") == "folder":
                    console.print(f"[blue]{name}[/blue]")
                else:
                    console.print(name)

    run_async(_with_client(key_id, application_key, list_files))


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
