"""STOMP frames, headers, header value encoding, heart-beat parsing and frame reading and writing."""