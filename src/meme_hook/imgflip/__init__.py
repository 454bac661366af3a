"""imgflip.com captioning API client."""

from meme_hook.imgflip.client import ImgflipClient, build_caption_form

__all__ = ["ImgflipClient", "build_caption_form"]
