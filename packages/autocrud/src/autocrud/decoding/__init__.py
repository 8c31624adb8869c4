from autocrud.decoding.json_decoder import JsonDecoder

__all__ = ["JsonDecoder"]
