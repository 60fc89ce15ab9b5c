"""
Folder organization example.

Walks through the library lifecycle:
1. Restore or start a session
2. Build a small folder tree
3. Upload a paper and file it
4. Print the tree
5. Move and clean up folders
"""

import sys
from pathlib import Path

from scholarvault import (
    AuthSession,
    Client,
    CycleError,
    FileTokenStore,
    Library,
    RemoteRequestError,
    UploadTracker,
    configure_logging,
    get_settings,
)
from scholarvault.library import iter_all


def print_tree(library: Library) -> None:
    for node in iter_all(library.forest()):
        marker = "*" if node.selected else " "
        print(f"{marker} {'  ' * node.depth}{node.name}")


def main():
    """Run the folder workflow against a local server"""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    client = Client.from_settings(settings)
    session = AuthSession(client, FileTokenStore(settings.TOKEN_FILE))

    # STEP 1: Session
    if session.initialize() is None:
        session.login("ada@example.com", "your_password_here")
    print(f"Signed in as {session.user.email}")

    library = Library(client, session, max_tree_depth=settings.MAX_TREE_DEPTH)
    library.refresh()

    # STEP 2: Folders
    thesis = library.create_folder("Thesis")
    background = library.create_folder("Background", parent_id=thesis.id)
    drafts = library.create_folder("drafts", parent_id=thesis.id)

    # STEP 3: Upload
    paper = Path("papers/attention_is_all_you_need.pdf")
    if paper.exists():
        tracker = UploadTracker()
        tracker.subscribe(lambda t: print(f"  upload: {t.phase.value} {t.bytes_sent}/{t.total_bytes}"))
        try:
            document = library.upload_document(paper, tracker)
            library.add_to_collection(background.id, document.id)
        except RemoteRequestError as e:
            print(f"Upload failed: {e.message}")
    else:
        print(f"{paper} not found (skipping upload)")

    # STEP 4: Tree
    library.select(background.id)
    print_tree(library)
    print(f"{len(library.visible_documents())} paper(s) in {background.name}")

    # STEP 5: Move and delete
    try:
        library.move_folder(thesis.id, drafts.id)
    except CycleError as e:
        print(f"Refused: {e.message}")

    removed = library.delete_folder(thesis.id)
    print(f"Deleted {len(removed)} folder(s)")

    client.close()


if __name__ == "__main__":
    sys.exit(main())
