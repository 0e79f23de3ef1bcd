"""Hypothesis strategies shared by property tests."""

from hypothesis import strategies as st

from projectdescription import CopyFilesAction, Destination, FileElement, FileElementKind

paths = st.text(min_size=1, max_size=30)

file_elements = st.builds(FileElement, kind=st.sampled_from(FileElementKind), path=paths)

destinations = st.sampled_from(Destination)

factory_destinations = st.sampled_from([d for d in Destination if d is not Destination.ABSOLUTE_PATH])

subpaths = st.none() | st.text(max_size=20)

actions = st.builds(
    CopyFilesAction,
    name=st.text(max_size=20),
    destination=destinations,
    subpath=subpaths,
    files=st.lists(file_elements, max_size=5).map(tuple),
)
