"""Static HTML served by the API."""
from __future__ import annotations

ROOM_PAGE = """<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"UTF-8\" />
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1.0\" />
    <title>Video Appointment</title>
    <script src=\"https://cdn.tailwindcss.com\"></script>
</head>
<body class=\"min-h-screen bg-slate-950 text-slate-100\">
    <div class=\"border-b border-slate-800 bg-slate-900/80 backdrop-blur\">
        <div class=\"mx-auto flex max-w-5xl items-center justify-between px-6 py-4\">
            <div class=\"text-lg font-semibold\">Video Appointment</div>
            <span id=\"roomLabel\" class=\"text-xs text-slate-500\"></span>
        </div>
    </div>

    <main class=\"mx-auto max-w-5xl px-6 py-8\">
        <p id=\"status\" class=\"text-sm text-slate-400\">Connecting...</p>
        <div id=\"videoGrid\" class=\"mt-6 grid gap-4 sm:grid-cols-2\">
            <video id=\"localVideo\" class=\"w-full rounded-xl border border-slate-800 bg-black\" autoplay muted playsinline></video>
        </div>
    </main>

    <script>
        const statusEl = document.getElementById('status');
        const grid = document.getElementById('videoGrid');
        const localVideo = document.getElementById('localVideo');
        const roomId = decodeURIComponent(window.location.pathname.split('/').filter(Boolean).pop() || '');
        const userId = self.crypto?.randomUUID ? self.crypto.randomUUID() : Math.random().toString(36).slice(2);
        const peers = new Map();
        let rtcConfig = { iceServers: [] };
        let localStream = null;
        let socket = null;

        document.getElementById('roomLabel').textContent = `Room ${roomId}`;

        function setStatus(message) {
            statusEl.textContent = message;
        }

        function send(message) {
            if (socket && socket.readyState === WebSocket.OPEN) {
                socket.send(JSON.stringify(message));
            }
        }

        function removePeer(peerId) {
            const entry = peers.get(peerId);
            if (!entry) {
                return;
            }
            entry.pc.close();
            entry.video.remove();
            peers.delete(peerId);
        }

        function createPeer(peerId) {
            removePeer(peerId);
            const pc = new RTCPeerConnection(rtcConfig);
            const video = document.createElement('video');
            video.autoplay = true;
            video.playsInline = true;
            video.className = 'w-full rounded-xl border border-slate-800 bg-black';
            grid.appendChild(video);

            if (localStream) {
                localStream.getTracks().forEach((track) => pc.addTrack(track, localStream));
            }
            pc.addEventListener('icecandidate', (event) => {
                if (event.candidate) {
                    send({ type: 'ice-candidate', target: peerId, payload: event.candidate });
                }
            });
            pc.addEventListener('track', (event) => {
                video.srcObject = event.streams[0];
            });

            peers.set(peerId, { pc, video });
            return pc;
        }

        async function callPeer(peerId) {
            const pc = createPeer(peerId);
            const offer = await pc.createOffer();
            await pc.setLocalDescription(offer);
            send({ type: 'offer', target: peerId, payload: offer });
        }

        async function answerPeer(peerId, offer) {
            const pc = createPeer(peerId);
            await pc.setRemoteDescription(offer);
            const answer = await pc.createAnswer();
            await pc.setLocalDescription(answer);
            send({ type: 'answer', target: peerId, payload: answer });
        }

        async function handleMessage(message) {
            switch (message.type) {
                case 'room-joined':
                    setStatus(message.participants.length ? 'Waiting for the other side to call...' : 'Waiting for others to join.');
                    break;
                case 'user-connected':
                    setStatus('Participant joined. Connecting...');
                    await callPeer(message.user_id);
                    break;
                case 'user-disconnected':
                    removePeer(message.user_id);
                    setStatus('Participant left.');
                    break;
                case 'offer':
                    await answerPeer(message.user_id, message.payload);
                    setStatus('Connected.');
                    break;
                case 'answer': {
                    const entry = peers.get(message.user_id);
                    if (entry) {
                        await entry.pc.setRemoteDescription(message.payload);
                        setStatus('Connected.');
                    }
                    break;
                }
                case 'ice-candidate': {
                    const entry = peers.get(message.user_id);
                    if (entry && message.payload) {
                        await entry.pc.addIceCandidate(message.payload);
                    }
                    break;
                }
                case 'error':
                    console.warn('Signaling error:', message.reason);
                    break;
                default:
                    break;
            }
        }

        async function start() {
            try {
                const response = await fetch('/api/rtc/ice-servers');
                const body = await response.json();
                rtcConfig = { iceServers: body.ice_servers || [] };
            } catch (error) {
                console.warn('Falling back to host candidates only:', error);
            }

            try {
                localStream = await navigator.mediaDevices.getUserMedia({ video: true, audio: true });
                localVideo.srcObject = localStream;
            } catch (error) {
                console.error(error);
                setStatus('Camera or microphone unavailable. Joining without media.');
            }

            const scheme = window.location.protocol === 'https:' ? 'wss' : 'ws';
            socket = new WebSocket(`${scheme}://${window.location.host}/api/rtc/signaling`);
            socket.addEventListener('open', () => {
                send({ type: 'join-room', room_id: roomId, user_id: userId });
            });
            socket.addEventListener('message', (event) => {
                handleMessage(JSON.parse(event.data)).catch((error) => console.error(error));
            });
            socket.addEventListener('close', () => {
                setStatus('Disconnected from the appointment room.');
                Array.from(peers.keys()).forEach(removePeer);
            });
        }

        start();
    </script>
</body>
</html>
"""

INDEX_PAGE = """<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"UTF-8\" />
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1.0\" />
    <title>Hospital Appointments</title>
    <script src=\"https://cdn.tailwindcss.com\"></script>
</head>
<body class=\"min-h-screen bg-slate-950 text-slate-100\">
    <main class=\"mx-auto max-w-3xl px-6 py-16\">
        <h1 class=\"text-2xl font-semibold\">Hospital Appointments</h1>
        <p class=\"mt-2 text-sm text-slate-400\">Start a video consultation and share the link with your doctor.</p>
        <a href=\"/appointment\" class=\"mt-6 inline-block rounded-full bg-emerald-500 px-5 py-3 text-sm font-semibold text-black hover:bg-emerald-400\">Start video appointment</a>
        <p class=\"mt-8 text-xs text-slate-500\">API reference: <a class=\"underline\" href=\"/docs\">/docs</a></p>
    </main>
</body>
</html>
"""
