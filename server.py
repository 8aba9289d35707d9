import os

from config import ASYNC_MODE, SECRET_KEY, PORT

# IMPORTANT : Le monkey_patch doit être au tout début (mode eventlet seulement)
if ASYNC_MODE == 'eventlet':
    import eventlet
    eventlet.monkey_patch()

from flask import Flask, render_template_string, request
from flask_socketio import SocketIO, emit, join_room

from controller import GameController, LIFECYCLE_EVENTS, HIDDEN_EVENTS
from progression import ProgressionTable
from share import ShareTarget, ShareNotAvailable

# --- INITIALISATION ---
app = Flask(__name__)
app.config['SECRET_KEY'] = SECRET_KEY

socketio = SocketIO(app, cors_allowed_origins="*", async_mode=ASYNC_MODE)

TABLE = ProgressionTable.from_config()

# Contrôleurs actifs : { sid: {'key': session_key, 'controller': GameController} }
sessions = {}

# Sauvegardes en mémoire vive, perdues à l'arrêt du serveur : { session_key: snapshot }
snapshots = {}


# --- VUE & PARTAGE (côté client) ---

class SocketView:
    """Envoie les mises à jour d'affichage au navigateur du joueur"""

    def __init__(self, sid):
        self.sid = sid

    def set_image(self, image_id):
        socketio.emit('set_image', {'image': image_id}, room=self.sid)

    def set_text(self, revenue, units_sold):
        socketio.emit('set_text', {'revenue': revenue, 'units_sold': units_sold}, room=self.sid)

    def notify(self, message):
        socketio.emit('notify', {'message': message}, room=self.sid)


class SocketShareTarget(ShareTarget):
    """
    Demande au navigateur d'ouvrir sa feuille de partage.
    can_share est déclaré par le client au démarrage de la session.
    """

    def __init__(self, sid, can_share):
        self.sid = sid
        self.can_share = can_share

    def send(self, text, mime_type):
        if not self.can_share:
            raise ShareNotAvailable(self.sid)
        socketio.emit('share_intent', {'text': text, 'type': mime_type}, room=self.sid)


# --- FONCTIONS UTILITAIRES ---

def current_session():
    s = sessions.get(request.sid)
    if not s:
        emit('error', "Session non démarrée")
    return s


def read_payload(data, event_name):
    """Les événements attendent un objet JSON, sinon on répond par une erreur"""
    if isinstance(data, dict):
        return data
    print(f"❌ [ERROR] {event_name}: données invalides ({type(data).__name__})")
    emit('error', "Données invalides")
    return None


def end_session(sid):
    """Sauvegarde puis détruit le contrôleur d'un sid"""
    # La room du sid est gardée : le client doit encore recevoir les erreurs,
    # Socket.IO la vide lui-même à la déconnexion
    s = sessions.pop(sid, None)
    if not s:
        return None
    snapshots[s['key']] = s['controller'].suspend()
    s['controller'].handle('destroy')
    return s


# --- ROUTES & SOCKETS ---

HTML_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'index.html')
with open(HTML_PATH, 'r', encoding='utf-8') as f:
    HTML_TEMPLATE = f.read()


@app.route('/')
def index():
    return render_template_string(HTML_TEMPLATE)


@socketio.on('start_session')
def handle_start(data):
    data = read_payload(data, 'start_session')
    if data is None:
        return
    key = str(data.get('session_key', '')).strip()

    if not key or len(key) > 64:
        return emit('error', "Clé de session invalide")

    # Un même sid qui redémarre : on sauvegarde l'ancienne partie d'abord
    end_session(request.sid)

    join_room(request.sid)
    snapshot = snapshots.get(key)

    sessions[request.sid] = {
        'key': key,
        'controller': GameController(
            TABLE,
            SocketView(request.sid),
            SocketShareTarget(request.sid, data.get('can_share') is True),
            socketio.start_background_task,
            socketio.sleep,
            snapshot=snapshot
        )
    }
    sessions[request.sid]['controller'].handle('create')

    emit('session_ok', {'session_key': key, 'restored': snapshot is not None})


@socketio.on('tap')
def handle_tap():
    s = current_session()
    if not s:
        return
    s['controller'].tap()


@socketio.on('share')
def handle_share():
    s = current_session()
    if not s:
        return
    s['controller'].share()


@socketio.on('lifecycle')
def handle_lifecycle(data):
    s = current_session()
    if not s:
        return

    data = read_payload(data, 'lifecycle')
    if data is None:
        return

    event = data.get('event')
    if not isinstance(event, str) or event not in LIFECYCLE_EVENTS:
        return emit('error', f"Événement inconnu : {event}")

    if event == 'destroy':
        end_session(request.sid)
        return

    s['controller'].handle(event)

    # Écran masqué : on sauvegarde comme avant une mise en arrière-plan
    if event in HIDDEN_EVENTS:
        snapshots[s['key']] = s['controller'].suspend()


# Nettoyage complet à la déconnexion
@socketio.on('disconnect')
def handle_disconnect():
    s = end_session(request.sid)
    if s:
        print(f"👋 [DISCONNECT] session {s['key']} sauvegardée")


if __name__ == '__main__':
    print(f"✅ [SYSTEM] Serveur démarré sur le port {PORT}")
    print(f"🐟 [INFO] Paliers chargés : {len(TABLE)}")
    socketio.run(app, host='0.0.0.0', port=PORT, debug=False)
