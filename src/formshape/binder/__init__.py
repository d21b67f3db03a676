"""Form-library binder plugin system for formshape."""

# Importing the binder modules registers them
from formshape.binder.base import Binder, FlatMessageBinder, MirrorBinder
from formshape.binder.felte import felte_binder
from formshape.binder.formik import formik_binder
from formshape.binder.mantine import mantine_binder
from formshape.binder.registry import BinderRegistry, UnsupportedBinderError
from formshape.binder.rhf import rhf_binder
from formshape.binder.tanstack import tanstack_binder
from formshape.binder.veevalidate import vee_binder

__all__ = [
    "Binder",
    "BinderRegistry",
    "FlatMessageBinder",
    "MirrorBinder",
    "UnsupportedBinderError",
    "felte_binder",
    "formik_binder",
    "mantine_binder",
    "rhf_binder",
    "tanstack_binder",
    "vee_binder",
]
