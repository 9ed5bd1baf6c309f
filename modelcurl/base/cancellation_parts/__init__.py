"""Cancellation implementation parts (see ``modelcurl.base.cancellation``)."""
