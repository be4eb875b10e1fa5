"""Project helpers: sanitize, streams, hold and cloud."""