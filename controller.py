from config import GAME_CONFIG, TICK_INTERVAL, LOG_TICKS_EVERY
from counter import SessionCounter
from session import sell, save_snapshot, restore_snapshot
from share import ShareNotAvailable

VISIBLE_EVENTS = ('start', 'resume', 'restart')
HIDDEN_EVENTS = ('pause', 'stop')
LIFECYCLE_EVENTS = ('create',) + VISIBLE_EVENTS + HIDDEN_EVENTS + ('destroy',)


class GameController:
    """
    Contrôleur d'un écran de jeu.
    Possède l'état de la session, reçoit les taps, le partage
    et les événements de cycle de vie, et pilote la vue.

    La vue doit fournir set_image(image_id), set_text(revenue, units_sold)
    et notify(message).
    """

    def __init__(self, table, view, share_target, start_task, sleep, snapshot=None,
                 interval=TICK_INTERVAL, log_every=LOG_TICKS_EVERY):
        self.table = table
        self.view = view
        self.share_target = share_target
        self.state = restore_snapshot(snapshot, table)
        self.counter = SessionCounter(self.state, start_task, sleep,
                                      interval=interval, log_every=log_every)

        if snapshot is not None:
            print(f"♻️ [SESSION] Restauration : {self.state}")

        self.view.set_text(self.state.revenue, self.state.units_sold)
        self.view.set_image(self.state.current_tier.image_id)

    def tap(self):
        changed = sell(self.state, self.table)
        self.view.set_text(self.state.revenue, self.state.units_sold)
        if changed:
            self.view.set_image(self.state.current_tier.image_id)
        return changed

    def share(self):
        text = GAME_CONFIG["share_text"].format(
            units_sold=self.state.units_sold,
            revenue=self.state.revenue
        )
        try:
            self.share_target.send(text, 'text/plain')
        except ShareNotAvailable:
            self.view.notify(GAME_CONFIG["sharing_not_available"])
            return False
        return True

    def suspend(self):
        print("💾 [SESSION] Sauvegarde de l'état")
        return save_snapshot(self.state)

    def handle(self, event):
        """Point d'entrée unique des événements de cycle de vie"""
        if event not in LIFECYCLE_EVENTS:
            raise ValueError(f"Événement inconnu : {event}")

        print(f"🔄 [LIFECYCLE] {event}")

        if event in VISIBLE_EVENTS:
            self.counter.resume()
        elif event in HIDDEN_EVENTS:
            self.counter.pause()
        elif event == 'destroy':
            self.counter.discard()
