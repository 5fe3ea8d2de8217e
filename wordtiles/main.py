from __future__ import annotations
import logging

import socketio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .schemas import GameStateView, HighScoreView, InputUpdate, SubmitResult, SubmitWord, WordLookup
from .managers.game import SessionManager
from .dictionary import service as dict_service
from .store import JsonFileHighScoreStore

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s | %(levelname)s | %(name)s | %(message)s',
)
logger = logging.getLogger(__name__)

# Socket.IO server (ASGI)
cors_origins = '*' if settings.CORS_ORIGINS == ['*'] else settings.CORS_ORIGINS
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=cors_origins)
app = FastAPI(title="Word Tiles Server", version="0.1.0")

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

high_scores = JsonFileHighScoreStore(settings.HIGH_SCORE_PATH, key=settings.HIGH_SCORE_KEY)
games = SessionManager(sio, dict_service, high_scores, settings)

# REST Endpoints
@app.get('/games/{game_id}', response_model=GameStateView)
async def get_game(game_id: str):
    return games.get_state(game_id)

@app.put('/games/{game_id}/input', response_model=GameStateView)
async def update_input(game_id: str, body: InputUpdate):
    return games.update_input(game_id, body.text)

@app.post('/games/{game_id}/words', response_model=SubmitResult)
async def submit_word(game_id: str, body: SubmitWord):
    return await games.submit(game_id, body.word)

@app.post('/games/{game_id}/give-up', response_model=GameStateView)
async def give_up(game_id: str):
    return await games.end_session(game_id)

@app.get('/high-score', response_model=HighScoreView)
async def get_high_score():
    return HighScoreView(highScore=games.high_score())

# Dictionary lookup REST endpoint
@app.get('/dict/validate', response_model=WordLookup)
async def validate_word(word: str):
    valid, definition = await games.dictionary.lookup(word)
    return WordLookup(word=word.upper(), valid=valid, definition=definition)

# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    await sio.save_session(sid, {})
    await sio.emit('pong', to=sid)

@sio.event
async def disconnect(sid):
    logger.debug("Client %s disconnected", sid)

@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)

async def _game_id_for(sid):
    sess = await sio.get_session(sid)
    return sess.get('game_id') if sess else None

@sio.on('join-game')
async def join_game(sid, game_id: str):
    if not isinstance(game_id, str) or not game_id.strip():
        return
    game_id = game_id.strip()
    await sio.enter_room(sid, game_id)
    sess = await sio.get_session(sid) or {}
    await sio.save_session(sid, { **sess, 'game_id': game_id })
    state = games.get_state(game_id)
    await sio.emit('game:state', state.model_dump(mode='json'), to=sid)

@sio.on('input:change')
async def input_change(sid, text):
    game_id = await _game_id_for(sid)
    if not game_id:
        return
    games.update_input(game_id, text if isinstance(text, str) else '')

@sio.on('word:submit')
async def word_submit(sid, payload=None):
    game_id = await _game_id_for(sid)
    if not game_id:
        return
    # Accept a bare string, {'word': ...}, or nothing (submit the current input)
    word = payload.get('word') if isinstance(payload, dict) else payload
    if word is not None and not isinstance(word, str):
        return
    result = await games.submit(game_id, word)
    if not result.stale:
        await sio.emit('word:result', result.model_dump(mode='json'), to=sid)

@sio.on('game:giveUp')
async def give_up_event(sid):
    game_id = await _game_id_for(sid)
    if not game_id:
        return
    await games.end_session(game_id)

# Export ASGI app for uvicorn
application = asgi_app

# For local running: uvicorn wordtiles.main:application --reload --host 0.0.0.0 --port 8000
